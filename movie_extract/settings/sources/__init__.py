"""Data source settings."""

from movie_extract.settings.sources.imdb import IMDbSettings

__all__ = [
    "IMDbSettings",
]
