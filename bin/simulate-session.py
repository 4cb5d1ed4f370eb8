"""Play one headless diagnosis session with random scores and print each player's type.

Usage: uv run python bin/simulate-session.py [player_name ...]

Set PARTY_SEED to a 192-char hex seed to reproduce a session.
"""

import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from party.runner.simulate import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
