"""
Random sources for diagnosis queue building.

Sessions can be reproduced from a hex seed: the same seed always builds the
same round queue. Production sessions generate a fresh cryptographic seed so
the queue cannot be predicted, and log it so a session can be replayed.
"""

import random
import secrets

SEED_BYTES = 96  # 768 bits, stored as 192 hex characters


def validate_seed_hex(seed_hex: str) -> None:
    """Validate that a seed string is the correct hex format.

    Enforces exact length (192 hex chars = 96 bytes) and valid hex characters.
    Raises TypeError for non-string input, ValueError for invalid format.
    """
    if not isinstance(seed_hex, str):
        raise TypeError(f"Seed must be a string, got {type(seed_hex).__name__}")
    expected_length = SEED_BYTES * 2
    if len(seed_hex) != expected_length:
        raise ValueError(f"Seed must be exactly {expected_length} hex characters, got {len(seed_hex)}")
    try:
        bytes.fromhex(seed_hex)
    except ValueError:
        raise ValueError("Seed contains invalid hex characters") from None


def generate_seed() -> str:
    """Generate a cryptographic seed as a hex string (192 chars)."""
    return secrets.token_bytes(SEED_BYTES).hex()


def create_queue_rng(seed_hex: str | None) -> random.Random:
    """
    Create an RNG for round selection and shuffling.

    Uses stdlib random.Random: picking six minigames out of a small catalog
    needs reproducibility, not cryptographic strength. None gives an
    unseeded (OS-entropy) generator.
    """
    if seed_hex is None:
        return random.Random()  # noqa: S311
    validate_seed_hex(seed_hex)
    return random.Random(int(seed_hex, 16))  # noqa: S311
