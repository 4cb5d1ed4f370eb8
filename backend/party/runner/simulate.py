"""
Headless diagnosis driver.

Plays a full diagnosis session without any presentation layer: each round's
raw scores come from a caller-supplied score function. Used by
bin/simulate-session.py and by integration tests.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from uuid import uuid4

import structlog

from party.logic.catalog import DEFAULT_CATALOG, DEFAULT_POINTS_TABLE
from party.logic.enums import Category, SessionMode
from party.logic.points import PointsTable
from party.logic.rng import create_queue_rng, generate_seed
from party.logic.roster import PartyPlayer, Roster
from party.logic.sequencer import SessionSequencer
from party.logic.settings import DiagnosisSettings
from party.logic.types import PlayerSummary, RawScore, RoundDescriptor

logger = structlog.get_logger()

ScoreFunction = Callable[[RoundDescriptor, PartyPlayer], float]

# input binding and color per local seat
DEFAULT_SEATS: tuple[tuple[str, str], ...] = (("Q", "green"), ("R", "blue"), ("U", "red"), ("P", "yellow"))

# plausible raw ranges per category: reaction ms, press counts, deviation ms
_SCORE_RANGES: dict[Category, tuple[int, int]] = {
    Category.REFLEX: (150, 900),
    Category.MASH: (20, 120),
    Category.HOLD: (0, 2000),
}


def build_default_roster(names: Sequence[str]) -> Roster:
    """Create a roster with one player per default seat, using the given names in order."""
    if len(names) > len(DEFAULT_SEATS):
        raise ValueError(f"at most {len(DEFAULT_SEATS)} players supported, got {len(names)}")
    return Roster(
        PartyPlayer(player_id=i, name=name, input_binding=binding, color=color)
        for i, (name, (binding, color)) in enumerate(zip(names, DEFAULT_SEATS, strict=False))
    )


def random_score_function(rng: random.Random) -> ScoreFunction:
    """Return a score function that draws integer raw values from per-category ranges."""

    def score(descriptor: RoundDescriptor, _player: PartyPlayer) -> float:
        low, high = _SCORE_RANGES[descriptor.category]
        return rng.randint(low, high)

    return score


def run_diagnosis(
    roster: Roster,
    score_function: ScoreFunction,
    *,
    catalog: Sequence[RoundDescriptor] = DEFAULT_CATALOG,
    points_table: PointsTable = DEFAULT_POINTS_TABLE,
    settings: DiagnosisSettings | None = None,
    seed: str | None = None,
) -> list[PlayerSummary]:
    """
    Play every round of a diagnosis session over the roster's joined players.

    The seed decides the round queue; a fresh seed is generated and logged
    when none is given.
    """
    seed = seed or generate_seed()
    structlog.contextvars.bind_contextvars(session_id=uuid4().hex[:8])
    try:
        sequencer = SessionSequencer(settings)
        sequencer.start(SessionMode.DIAGNOSIS, roster, catalog, rng=create_queue_rng(seed))
        logger.info("diagnosis seed", seed=seed)

        while not sequencer.is_complete():
            descriptor = sequencer.current_round()
            raw_scores = [
                RawScore(player_id=p.player_id, value=score_function(descriptor, p)) for p in sequencer.players
            ]
            sequencer.complete_round(raw_scores, descriptor.lower_is_better, points_table)

        return sequencer.results()
    finally:
        structlog.contextvars.unbind_contextvars("session_id")


def format_summary(summary: PlayerSummary) -> str:
    totals = " ".join(f"{category.value}={total}" for category, total in summary.category_totals.items())
    if summary.classification is None:
        return f"{summary.name}: {totals}"
    return f"{summary.name}: {totals} -> {summary.classification.label.value} ({summary.classification.message})"


def main(argv: Sequence[str]) -> int:
    """Run one random diagnosis session for the named players and print each result."""
    from party.runner.settings import PartySettings  # noqa: PLC0415
    from shared.logging import setup_logging  # noqa: PLC0415

    names = list(argv) or ["Midori", "Ao", "Aka"]
    party_settings = PartySettings()
    setup_logging(log_dir=party_settings.log_dir)

    roster = build_default_roster(names)
    for player in roster.players:
        roster.toggle(player.input_binding)  # join
        roster.toggle(player.input_binding)  # ready
    diagnosis_settings = DiagnosisSettings(per_category_count=party_settings.per_category_count)
    if not roster.can_proceed(diagnosis_settings.min_lobby_players):
        print(f"Need at least {diagnosis_settings.min_lobby_players} ready players")
        return 1

    seed = party_settings.seed or generate_seed()
    summaries = run_diagnosis(
        roster,
        random_score_function(random.Random(f"{seed}:scores")),  # noqa: S311
        settings=diagnosis_settings,
        seed=seed,
    )
    for summary in summaries:
        print(format_summary(summary))
    return 0
