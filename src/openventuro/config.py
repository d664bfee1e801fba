"""
openventuro.config - Runtime Settings
=====================================

Settings are read from environment variables with the ``OPENVENTURO_``
prefix. Scaffold inputs (project name, deploy target) never come from
here; they come from the command line and prompts only.

Environment Variables
---------------------
OPENVENTURO_LOG_LEVEL
    Level for the ``openventuro`` logger (default ``WARNING``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from the environment."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="OPENVENTURO_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level so ``debug`` and ``DEBUG`` both work."""
        v = v.upper().strip()
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid:
            msg = f"Invalid log level '{v}'. Valid: {', '.join(sorted(valid))}"
            raise ValueError(msg)
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Tests that change the environment must call ``get_settings.cache_clear()``.
    """
    return Settings()
