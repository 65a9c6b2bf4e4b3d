"""Centralized configuration for the movie extractor.

Every value has a safe default and can be overridden through
environment variables or a ``.env`` file.

Usage:
    from movie_extract.settings import settings

    settings.imdb.base_url
    settings.etl.detail_delay
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_extract.settings.base import ETLSettings, LoggingSettings, PathsSettings
from movie_extract.settings.sources import IMDbSettings

__all__ = [
    # Main
    "Settings",
    "settings",
    # Base
    "PathsSettings",
    "LoggingSettings",
    "ETLSettings",
    # Sources
    "IMDbSettings",
    # Utilities
    "get_settings_summary",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from movie_extract.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")

    paths: PathsSettings = Field(default_factory=PathsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    etl: ETLSettings = Field(default_factory=ETLSettings)

    imdb: IMDbSettings = Field(default_factory=IMDbSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_settings_summary() -> dict[str, Any]:
    """Return the effective configuration as a plain dict.

    Returns:
        Configuration dictionary safe for logging.
    """
    return settings.model_dump(mode="json")
