"""
Points table: (participant count, rank) -> awarded points.

Each participant count maps to an ordered list of entries. A rank that has
no entry falls back to the points of the last entry in that list. The
fallback is applied to any unconfigured rank, including ranks far outside
the table's intended range, so it is logged every time it fires.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from party.logic.exceptions import ConfigurationError
from party.logic.types import PointEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = structlog.get_logger()


@dataclass(frozen=True)
class PointsTable:
    """Immutable lookup of rank points per participant count."""

    tables: dict[int, tuple[PointEntry, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for player_count, entries in self.tables.items():
            if player_count < 1:
                raise ConfigurationError(f"points table participant count must be >= 1, got {player_count}")
            if not entries:
                raise ConfigurationError(f"points table for {player_count} players has no entries")
            ranks = [entry.rank for entry in entries]
            if len(ranks) != len(set(ranks)):
                raise ConfigurationError(f"points table for {player_count} players has duplicate ranks: {ranks}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, Mapping[int, int] | Iterable[tuple[int, int]]]) -> PointsTable:
        """
        Build a table from {player_count: {rank: points}} or {player_count: [(rank, points), ...]}.

        Entry order is preserved; it decides which entry acts as the fallback.
        """
        tables: dict[int, tuple[PointEntry, ...]] = {}
        for player_count, raw_entries in mapping.items():
            pairs = raw_entries.items() if hasattr(raw_entries, "items") else raw_entries
            tables[player_count] = tuple(PointEntry(rank=rank, points=points) for rank, points in pairs)
        return cls(tables=tables)

    @property
    def participant_counts(self) -> list[int]:
        return sorted(self.tables)

    def has_table(self, player_count: int) -> bool:
        return player_count in self.tables

    def entries_for(self, player_count: int) -> tuple[PointEntry, ...]:
        """Return the entry list for a participant count, or raise ConfigurationError."""
        entries = self.tables.get(player_count)
        if not entries:
            logger.error("points table missing", player_count=player_count, configured=self.participant_counts)
            raise ConfigurationError(f"no points table configured for {player_count} players")
        return entries

    def lookup(self, player_count: int, rank: int) -> int:
        """
        Return the points for a rank, falling back to the last entry's points.

        Raises ConfigurationError if no table exists for the participant count.
        """
        entries = self.entries_for(player_count)
        for entry in entries:
            if entry.rank == rank:
                return entry.points

        fallback = entries[-1].points
        logger.warning(
            "rank missing from points table, using last entry",
            player_count=player_count,
            rank=rank,
            fallback_points=fallback,
        )
        return fallback
