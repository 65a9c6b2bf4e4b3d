"""Base configuration settings.

Contains foundational settings for paths, logging, and ETL.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

JSON_OUTPUT_FILENAME = "output.json"
CSV_OUTPUT_FILENAME = "output.csv"
DEFAULT_LOG_FILE = "extract.log"


# =============================================================================
# PATH SETTINGS
# =============================================================================


class PathsSettings(BaseSettings):
    """Output files and run log configuration.

    Attributes:
        output_dir: Directory receiving output.json / output.csv.
        log_file: Run log shared by every logger, appended to.
    """

    output_dir: Path = Field(default=Path("."), alias="OUTPUT_DIR")
    log_file: Path = Field(default=Path(DEFAULT_LOG_FILE), alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def json_output_path(self) -> Path:
        """Fixed destination of the JSON export."""
        return self.output_dir / JSON_OUTPUT_FILENAME

    @property
    def csv_output_path(self) -> Path:
        """Fixed destination of the CSV export."""
        return self.output_dir / CSV_OUTPUT_FILENAME


# =============================================================================
# LOGGING SETTINGS
# =============================================================================


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid LOG_LEVEL. Valid: {valid_levels}")
        return v_upper


# =============================================================================
# ETL SETTINGS
# =============================================================================


class ETLSettings(BaseSettings):
    """Scraping behaviour shared by every request.

    Attributes:
        user_agent: Browser-identifying User-Agent sent on every request.
        detail_delay: Pause awaited before each detail page request (seconds).
    """

    user_agent: str = Field(default="Mozilla/5.0", alias="USER_AGENT")
    detail_delay: float = Field(default=0.2, ge=0.0, alias="DETAIL_DELAY_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
