"""
Minigame catalog and points-table parsing.

Both arrive as already-parsed JSON-like data (lists of dicts). Pydantic
validation errors are converted to ConfigurationError at this boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from party.logic.enums import Category
from party.logic.exceptions import ConfigurationError
from party.logic.points import PointsTable
from party.logic.types import PointEntry, RoundDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable


class PointsTableConfig(BaseModel):
    """One participant count's entry list as it appears in configuration."""

    model_config = ConfigDict(frozen=True)

    player_count: int = Field(ge=1)
    entries: list[PointEntry] = Field(min_length=1)


_CATALOG_ADAPTER = TypeAdapter(list[RoundDescriptor])
_POINTS_ADAPTER = TypeAdapter(list[PointsTableConfig])


def parse_catalog(items: Iterable[dict[str, Any]]) -> list[RoundDescriptor]:
    """Validate catalog items; round references must be unique."""
    try:
        catalog = _CATALOG_ADAPTER.validate_python(list(items))
    except ValidationError as e:
        raise ConfigurationError(f"invalid minigame catalog: {e}") from e

    references = [d.reference for d in catalog]
    duplicates = sorted({r for r in references if references.count(r) > 1})
    if duplicates:
        raise ConfigurationError(f"duplicate round references in catalog: {duplicates}")
    return catalog


def parse_points_tables(items: Iterable[dict[str, Any]]) -> PointsTable:
    """Validate points-table items into a PointsTable; participant counts must be unique."""
    try:
        configs = _POINTS_ADAPTER.validate_python(list(items))
    except ValidationError as e:
        raise ConfigurationError(f"invalid points table: {e}") from e

    tables: dict[int, tuple[PointEntry, ...]] = {}
    for config in configs:
        if config.player_count in tables:
            raise ConfigurationError(f"duplicate points table for {config.player_count} players")
        tables[config.player_count] = tuple(config.entries)
    return PointsTable(tables=tables)


DEFAULT_CATALOG: tuple[RoundDescriptor, ...] = (
    RoundDescriptor(reference="pika_stop", category=Category.REFLEX, name="Pika Stop", lower_is_better=True),
    RoundDescriptor(reference="pitari_relay", category=Category.REFLEX, name="Pitari Relay", lower_is_better=True),
    RoundDescriptor(
        reference="gobyo_challenge", category=Category.REFLEX, name="Five Second Challenge", lower_is_better=True
    ),
    RoundDescriptor(reference="balloon", category=Category.MASH, name="Balloon Pump"),
    RoundDescriptor(reference="car_race", category=Category.MASH, name="Car Race"),
    RoundDescriptor(reference="renda_master", category=Category.MASH, name="Renda Master"),
    RoundDescriptor(reference="cup_water", category=Category.HOLD, name="Cup Water", lower_is_better=True),
    RoundDescriptor(reference="rocket_launch", category=Category.HOLD, name="Rocket Launch", lower_is_better=True),
    RoundDescriptor(reference="tobikko_meijin", category=Category.HOLD, name="Tobikko Meijin", lower_is_better=True),
)

DEFAULT_POINTS_TABLE = PointsTable.from_mapping(
    {
        2: {1: 10, 2: 5},
        3: {1: 10, 2: 6, 3: 3},
        4: {1: 10, 2: 7, 3: 5, 4: 3},
    }
)
