from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pluscodes.core.constants import PAIR_CODE_LENGTH, SEPARATOR_POSITION


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODES_",
        case_sensitive=False,
    )

    # Length used by encode() when the caller does not pass one.
    default_code_length: int = PAIR_CODE_LENGTH

    # Also reject full codes whose first lat/lng digit alone leaves the globe.
    strict_full_codes: bool = False

    @field_validator("default_code_length")
    @classmethod
    def _check_code_length(cls, v: int) -> int:
        if v < 2 or (v < SEPARATOR_POSITION and v % 2 == 1):
            raise ValueError(f"invalid code length: {v}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
