"""
Roster of local players and lobby participation state.

The roster outlives any single session. Sessions reference the joined
subset by identity and never copy players.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from party.logic.enums import CATEGORIES, Category, LobbyStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from party.logic.types import Classification

logger = structlog.get_logger()


def empty_category_totals() -> dict[Category, int]:
    return dict.fromkeys(CATEGORIES, 0)


@dataclass
class PartyPlayer:
    """
    A local player bound to one input on the shared device.
    """

    player_id: int
    name: str
    input_binding: str  # opaque key/button token
    color: str  # opaque color token

    status: LobbyStatus = LobbyStatus.IDLE

    # accumulated per session
    category_totals: dict[Category, int] = field(default_factory=empty_category_totals)

    # transient, overwritten each round
    last_raw_score: float | None = None
    last_points: int = 0

    # set once when a diagnosis session completes
    classification: Classification | None = None

    @property
    def is_joined(self) -> bool:
        return self.status in (LobbyStatus.JOINED, LobbyStatus.READY)

    @property
    def is_ready(self) -> bool:
        return self.status == LobbyStatus.READY

    def reset_for_new_session(self) -> None:
        """Clear totals, transient round fields and classification; keep lobby status."""
        self.category_totals = empty_category_totals()
        self.last_raw_score = None
        self.last_points = 0
        self.classification = None

    def reset_for_lobby(self) -> None:
        """Return the player to the idle lobby state with nothing accumulated."""
        self.status = LobbyStatus.IDLE
        self.reset_for_new_session()


# idle -> joined -> ready -> idle
_NEXT_STATUS: dict[LobbyStatus, LobbyStatus] = {
    LobbyStatus.IDLE: LobbyStatus.JOINED,
    LobbyStatus.JOINED: LobbyStatus.READY,
    LobbyStatus.READY: LobbyStatus.IDLE,
}


class Roster:
    """Own all players on the device and track lobby join/ready state."""

    def __init__(self, players: Iterable[PartyPlayer]) -> None:
        self._players: list[PartyPlayer] = list(players)
        ids = [p.player_id for p in self._players]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate player ids in roster: {ids}")
        bindings = [p.input_binding for p in self._players]
        if len(bindings) != len(set(bindings)):
            raise ValueError(f"duplicate input bindings in roster: {bindings}")

    @property
    def players(self) -> list[PartyPlayer]:
        return list(self._players)

    def get(self, player_id: int) -> PartyPlayer | None:
        return next((p for p in self._players if p.player_id == player_id), None)

    def by_binding(self, input_binding: str) -> PartyPlayer | None:
        return next((p for p in self._players if p.input_binding == input_binding), None)

    def joined_players(self) -> list[PartyPlayer]:
        """Return joined players in roster order."""
        return [p for p in self._players if p.is_joined]

    def toggle(self, input_binding: str) -> LobbyStatus | None:
        """
        Advance a player's lobby status when their input is pressed.

        Returns the new status, or None if no player owns the binding.
        """
        player = self.by_binding(input_binding)
        if player is None:
            logger.warning("lobby input has no player", input_binding=input_binding)
            return None
        player.status = _NEXT_STATUS[player.status]
        logger.debug("lobby status changed", player_id=player.player_id, status=player.status)
        return player.status

    def can_proceed(self, min_players: int = 2) -> bool:
        """Return True when enough players joined and every joined player is ready."""
        joined = self.joined_players()
        return len(joined) >= min_players and all(p.is_ready for p in joined)

    def reset_for_lobby(self) -> None:
        """Reset every player for a fresh lobby (joined/ready state and all session data)."""
        for player in self._players:
            player.reset_for_lobby()
