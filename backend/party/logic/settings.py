"""Centralized diagnosis settings: queue size, classification thresholds and lobby rules."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from party.logic.exceptions import ConfigurationError


class DiagnosisSettings(BaseModel):
    """
    Tunable rules for a diagnosis session.

    All fields have default values matching the shipped game.
    """

    model_config = ConfigDict(frozen=True)

    # --- Queue ---
    per_category_count: int = 2

    # --- Classification tiers ---
    high_threshold: int = 16  # total >= this is "high"
    mid_min: int = 10  # mid_min <= total <= mid_max is "mid"
    mid_max: int = 15

    # --- Lobby ---
    min_lobby_players: int = 2

    # --- Presentation reads ---
    radar_scale: int = 20  # category total that fills a radar axis


def validate_settings(settings: DiagnosisSettings) -> None:
    """Validate that settings describe a consistent rule set.

    Raises ConfigurationError for counts below 1 or overlapping tiers.
    """
    if settings.per_category_count < 1:
        raise ConfigurationError(f"per_category_count must be >= 1, got {settings.per_category_count}")
    if settings.min_lobby_players < 1:
        raise ConfigurationError(f"min_lobby_players must be >= 1, got {settings.min_lobby_players}")
    if settings.radar_scale < 1:
        raise ConfigurationError(f"radar_scale must be >= 1, got {settings.radar_scale}")
    if settings.mid_min > settings.mid_max:
        raise ConfigurationError(f"mid_min ({settings.mid_min}) must not exceed mid_max ({settings.mid_max})")
    if settings.mid_max >= settings.high_threshold:
        raise ConfigurationError(
            f"mid_max ({settings.mid_max}) must be below high_threshold ({settings.high_threshold})"
        )
