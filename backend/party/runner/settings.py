"""Headless runner configuration via environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from party.logic.rng import validate_seed_hex


class PartySettings(BaseSettings):
    model_config = {"env_prefix": "PARTY_"}

    log_dir: str = Field(default="backend/logs/party", min_length=1)
    seed: str | None = None  # 192 hex chars; unset means a fresh random seed per session
    per_category_count: int = Field(default=2, ge=1)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: str | None) -> str | None:
        if v is not None:
            validate_seed_hex(v)
        return v
