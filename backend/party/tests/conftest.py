import random
from collections.abc import Mapping, Sequence

import pytest

from party.logic.enums import Category, LobbyStatus
from party.logic.points import PointsTable
from party.logic.roster import PartyPlayer, Roster
from party.logic.types import RawScore, RoundDescriptor

# ============================================================================
# Test Builder Helpers
# ============================================================================

_BINDINGS = ("Q", "R", "U", "P", "Z", "X")
_COLORS = ("green", "blue", "red", "yellow", "purple", "orange")


def create_player(
    player_id: int = 0,
    name: str | None = None,
    *,
    status: LobbyStatus = LobbyStatus.READY,
    totals: Mapping[Category, int] | None = None,
) -> PartyPlayer:
    player = PartyPlayer(
        player_id=player_id,
        name=name or f"Player {player_id}",
        input_binding=_BINDINGS[player_id],
        color=_COLORS[player_id],
        status=status,
    )
    if totals is not None:
        player.category_totals.update(totals)
    return player


def create_roster(num_players: int = 3, *, joined: int | None = None) -> Roster:
    """Create a roster where the first `joined` players (default: all) are ready."""
    joined = num_players if joined is None else joined
    return Roster(
        create_player(i, status=LobbyStatus.READY if i < joined else LobbyStatus.IDLE) for i in range(num_players)
    )


def create_round(reference: str, category: Category = Category.REFLEX, *, lower_is_better: bool = False):
    return RoundDescriptor(reference=reference, category=category, lower_is_better=lower_is_better)


def create_catalog(per_category: int = 3) -> list[RoundDescriptor]:
    """Catalog with `per_category` rounds for each category, named <category>_<n>."""
    return [
        create_round(f"{category.value}_{n}", category)
        for category in (Category.REFLEX, Category.MASH, Category.HOLD)
        for n in range(per_category)
    ]


def scores(values: Mapping[int, float]) -> list[RawScore]:
    return [RawScore(player_id=player_id, value=value) for player_id, value in values.items()]


def ranked_scores(player_ids: Sequence[int]) -> list[RawScore]:
    """Scores where player_ids[0] is best (highest) and each next player is worse."""
    return [RawScore(player_id=pid, value=100 - i) for i, pid in enumerate(player_ids)]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def points_table() -> PointsTable:
    return PointsTable.from_mapping(
        {
            2: {1: 10, 2: 5},
            3: {1: 10, 2: 7, 3: 5},
            4: {1: 10, 2: 7, 3: 5, 4: 3},
        }
    )


@pytest.fixture
def catalog() -> list[RoundDescriptor]:
    return create_catalog()


@pytest.fixture
def roster() -> Roster:
    return create_roster(3)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
