"""
Per-player category totals, updated once per completed round.

Applying the same round twice double-counts; callers apply each round
exactly once, before advancing the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from party.logic.enums import CATEGORIES

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from party.logic.enums import Category
    from party.logic.roster import PartyPlayer
    from party.logic.types import RawScore


def apply_round_result(
    players: Iterable[PartyPlayer],
    points_by_player: Mapping[int, int],
    category: Category,
    raw_scores: Sequence[RawScore] = (),
) -> None:
    """
    Add each present player's round points to their total for the category.

    Players missing from points_by_player are left untouched, including
    their last-round fields.
    """
    raw_by_player = {score.player_id: score.value for score in raw_scores}
    for player in players:
        if player.player_id not in points_by_player:
            continue
        points = points_by_player[player.player_id]
        player.category_totals[category] = player.category_totals.get(category, 0) + points
        player.last_points = points
        player.last_raw_score = raw_by_player.get(player.player_id)


def normalized_totals(category_totals: Mapping[Category, int], scale: int) -> dict[Category, float]:
    """Return each category total divided by scale, clamped to [0, 1], for chart display."""
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    return {
        category: min(1.0, max(0.0, category_totals.get(category, 0) / scale)) for category in CATEGORIES
    }
