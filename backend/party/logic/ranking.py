"""
Rank-based points for one round.

Entries are sorted best-first and grouped by exactly equal raw values.
A tie group takes the rank of its last member in sorted order, so scores
10, 10, 20 (higher is better) rank as 3, 3, 1 and rank 2 is skipped.
Every member of a tie group receives the same points.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING

import structlog

from party.logic.exceptions import InvalidRoundResultError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from party.logic.points import PointsTable
    from party.logic.types import RawScore

logger = structlog.get_logger()


def rank_scores(raw_scores: Sequence[RawScore], *, lower_is_better: bool) -> dict[int, int]:
    """Return player_id -> rank, where a tie group shares the rank of its last member."""
    ordered = sorted(raw_scores, key=lambda score: score.value, reverse=not lower_is_better)

    ranks: dict[int, int] = {}
    position = 0
    for _, group in groupby(ordered, key=lambda score: score.value):
        members = list(group)
        position += len(members)
        for score in members:
            ranks[score.player_id] = position
    return ranks


def compute_round_points(
    raw_scores: Sequence[RawScore],
    lower_is_better: bool,  # noqa: FBT001
    points_table: PointsTable,
) -> dict[int, int]:
    """
    Convert one round's raw scores into points per player.

    The participant count is the number of scores supplied, not the roster
    size. Pure: nothing outside the returned mapping is modified.

    An empty score list means the round produced no results and yields an
    empty mapping. Raises InvalidRoundResultError for duplicate player ids
    and ConfigurationError when the table has no entry for the participant count.
    """
    if not raw_scores:
        logger.warning("round produced no scores")
        return {}
    player_ids = [score.player_id for score in raw_scores]
    if len(player_ids) != len(set(player_ids)):
        raise InvalidRoundResultError(f"duplicate player ids in round scores: {player_ids}")

    player_count = len(raw_scores)
    # resolve the table up front so a missing table yields no points at all
    points_table.entries_for(player_count)

    ranks = rank_scores(raw_scores, lower_is_better=lower_is_better)
    points: dict[int, int] = {}
    for player_id, rank in ranks.items():
        points[player_id] = points_table.lookup(player_count, rank)

    logger.debug("round points computed", player_count=player_count, ranks=ranks, points=points)
    return points
