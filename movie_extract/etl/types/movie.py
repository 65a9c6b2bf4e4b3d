"""Movie data types.

Canonical output record plus the two partial shapes it is
reconciled from: the listing summary and the detail-page
structured data.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOT_AVAILABLE = "N/A"
"""Sentinel for any field that could not be resolved."""


class MovieRecord(BaseModel):
    """One extracted movie, immutable once built.

    Serialized with camelCase keys (``by_alias``). Every field is a
    non-empty string or the ``N/A`` sentinel.

    Attributes:
        title: Listing title.
        release_year: Four-digit year or sentinel.
        rating: Aggregate rating as text or sentinel.
        directors: Comma-joined director names or sentinel.
        cast: Comma-joined actor names or sentinel.
        plot_summary: Listing plot snippet or sentinel.
        duration: Listing coarse form ("2h") or detail form ("2h30m").
        genre_tags: Comma-joined genres or sentinel.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str = NOT_AVAILABLE
    release_year: str = Field(default=NOT_AVAILABLE, alias="releaseYear")
    rating: str = NOT_AVAILABLE
    directors: str = NOT_AVAILABLE
    cast: str = NOT_AVAILABLE
    plot_summary: str = Field(default=NOT_AVAILABLE, alias="plotSummary")
    duration: str = NOT_AVAILABLE
    genre_tags: str = Field(default=NOT_AVAILABLE, alias="genreTags")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> str:
        """Stringify values, mapping missing or blank ones to the sentinel."""
        if v is None:
            return NOT_AVAILABLE
        text = str(v).strip()
        return text or NOT_AVAILABLE

    def to_dict(self) -> dict[str, str]:
        """Return the record with its output (camelCase) keys."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ListItem:
    """Fields available from one listing summary node."""

    title: str = NOT_AVAILABLE
    release_year: str = NOT_AVAILABLE
    plot_summary: str = NOT_AVAILABLE
    duration: str = NOT_AVAILABLE
    detail_url: str | None = None


@dataclass(frozen=True)
class DetailFields:
    """Fields decoded from a detail page's structured data block."""

    directors: str = NOT_AVAILABLE
    cast: str = NOT_AVAILABLE
    rating: str = NOT_AVAILABLE
    duration: str = NOT_AVAILABLE
    genre_tags: str = NOT_AVAILABLE


def build_record(item: ListItem, details: DetailFields | None = None) -> MovieRecord:
    """Merge listing fields with optional detail fields.

    Args:
        item: Parsed listing item.
        details: Structured data from the detail page, if any.

    Returns:
        The canonical record. Detail-only fields fall back to the
        sentinel and duration to the listing value when details
        are missing.
    """
    if details is None:
        details = DetailFields(duration=item.duration)

    return MovieRecord(
        title=item.title,
        release_year=item.release_year,
        rating=details.rating,
        directors=details.directors,
        cast=details.cast,
        plot_summary=item.plot_summary,
        duration=details.duration,
        genre_tags=details.genre_tags,
    )
