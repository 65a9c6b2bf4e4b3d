"""IMDb catalog scraping configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IMDbSettings(BaseSettings):
    """IMDb advanced-search configuration.

    Attributes:
        base_url: Site origin; detail links are resolved against it.
        page_size: Titles per listing page (drives the ``start`` offset).
    """

    base_url: str = Field(default="https://www.imdb.com", alias="IMDB_BASE_URL")
    page_size: int = Field(default=50, gt=0, alias="IMDB_PAGE_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
