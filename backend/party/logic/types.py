"""
Pydantic models for engine data crossing component boundaries.

Round descriptors and points entries come from external configuration;
raw scores come from each minigame's input handling; classifications are
read by the result screen.
"""

from pydantic import BaseModel, ConfigDict, Field

from party.logic.enums import AnimalType, Category


class RoundDescriptor(BaseModel):
    """One minigame available to a session, sourced from the catalog."""

    model_config = ConfigDict(frozen=True)

    reference: str = Field(min_length=1)  # scene/level identifier
    category: Category
    name: str = ""
    lower_is_better: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.reference


class PointEntry(BaseModel):
    """Points awarded for one rank (1 = best)."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    points: int = Field(ge=0)


class RawScore(BaseModel):
    """One player's raw performance value for a finished round."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    player_id: int
    value: float


class Classification(BaseModel):
    """Final diagnosis outcome for one player."""

    model_config = ConfigDict(frozen=True)

    label: AnimalType
    message: str = Field(min_length=1)


class PlayerSummary(BaseModel):
    """Read-only snapshot of a player after a session, for presentation."""

    player_id: int
    name: str
    category_totals: dict[Category, int]
    normalized_totals: dict[Category, float] = Field(default_factory=dict)  # totals / radar scale, clamped to [0, 1]
    classification: Classification | None = None
