"""Structured data extraction from IMDb detail pages.

Detail pages embed JSON-LD blocks describing several entity
types. Only the first block tagged as a Movie is decoded.
"""

import json
import logging
import re
from typing import Any

from bs4 import BeautifulSoup

from movie_extract.etl.errors import ParseTreeFailure, StructuredDataFailure
from movie_extract.etl.extractors.imdb.parsing import make_soup
from movie_extract.etl.types import NOT_AVAILABLE, DetailFields

LD_JSON_TYPE = "application/ld+json"
# Looser than a literal '"@type":"Movie"' substring: whitespace around the colon is accepted
MOVIE_MARKER = re.compile(r'"@type"\s*:\s*"Movie"')
DURATION_PREFIX = "PT"


class StructuredDataExtractor:
    """Decodes the Movie JSON-LD block of a detail page."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize extractor.

        Args:
            logger: Optional logger instance.
        """
        self._logger = logger or logging.getLogger(__name__)

    def extract(
        self,
        html: str,
        fallback_duration: str = NOT_AVAILABLE,
        url: str = "",
    ) -> DetailFields | None:
        """Extract detail fields from a detail page body.

        Args:
            html: Detail page body.
            fallback_duration: Duration kept when the block has none.
            url: Page URL, for diagnostics.

        Returns:
            DetailFields, or None when the page has no Movie block or
            the first one cannot be decoded.
        """
        try:
            soup = make_soup(html, url)
            raw = self._find_movie_block(soup)
            if raw is None:
                self._logger.debug(f"No Movie structured data at {url}")
                return None
            data = self._decode(raw, url)
        except (ParseTreeFailure, StructuredDataFailure) as e:
            self._logger.error(f"Structured data error at {url}: {e}")
            return None

        return self._to_fields(data, fallback_duration)

    # -------------------------------------------------------------------------
    # Block Selection
    # -------------------------------------------------------------------------

    @staticmethod
    def _find_movie_block(soup: BeautifulSoup) -> str | None:
        """Return the raw text of the first JSON-LD block marked Movie.

        The marker check tolerates whitespace around the colon, so
        pretty-printed blocks ('"@type": "Movie"') qualify too.

        Args:
            soup: Parsed detail page.

        Returns:
            Raw block text or None.
        """
        for script in soup.find_all("script"):
            if script.get("type") != LD_JSON_TYPE:
                continue
            text = script.get_text()
            if MOVIE_MARKER.search(text):
                return text
        return None

    @staticmethod
    def _decode(raw: str, url: str) -> dict[str, Any]:
        """Parse a JSON-LD block into an object.

        Raises:
            StructuredDataFailure: If the text is not a JSON object.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StructuredDataFailure(f"JSON parse error at {url}: {e}") from e

        if not isinstance(data, dict):
            raise StructuredDataFailure(f"Unexpected JSON-LD payload at {url}")
        return data

    # -------------------------------------------------------------------------
    # Field Mapping
    # -------------------------------------------------------------------------

    @classmethod
    def _to_fields(cls, data: dict[str, Any], fallback_duration: str) -> DetailFields:
        """Map a decoded Movie object to detail fields."""
        return DetailFields(
            directors=cls._extract_directors(data.get("director")),
            cast=cls._extract_cast(data.get("actor")),
            rating=cls._extract_rating(data.get("aggregateRating")),
            duration=cls._normalize_duration(data.get("duration"), fallback_duration),
            genre_tags=cls._extract_genres(data.get("genre")),
        )

    @staticmethod
    def _join_names(people: list[Any]) -> str:
        """Join the names of person objects with ', '."""
        names = [
            str(person["name"]).strip()
            for person in people
            if isinstance(person, dict) and person.get("name")
        ]
        return ", ".join(names) or NOT_AVAILABLE

    @classmethod
    def _extract_directors(cls, director: Any) -> str:
        """Directors from a list of persons or a single person."""
        if isinstance(director, list):
            return cls._join_names(director)
        if isinstance(director, dict) and director.get("name"):
            return str(director["name"]).strip()
        return NOT_AVAILABLE

    @classmethod
    def _extract_cast(cls, actor: Any) -> str:
        """Cast from a list of persons only."""
        if isinstance(actor, list):
            return cls._join_names(actor)
        return NOT_AVAILABLE

    @staticmethod
    def _extract_rating(aggregate: Any) -> str:
        """Stringified aggregate rating value."""
        if not isinstance(aggregate, dict):
            return NOT_AVAILABLE
        value = aggregate.get("ratingValue")
        if value is None or value == "":
            return NOT_AVAILABLE
        return str(value)

    @staticmethod
    def _normalize_duration(duration: Any, fallback: str) -> str:
        """Strip the ISO-8601 'PT' prefix and lowercase ('PT2H30M' -> '2h30m').

        Hours and minutes are not parsed; malformed tokens pass through.
        """
        if not duration:
            return fallback
        return str(duration).strip().removeprefix(DURATION_PREFIX).lower()

    @staticmethod
    def _extract_genres(genre: Any) -> str:
        """Genres from a list or a scalar."""
        if isinstance(genre, list):
            return ", ".join(str(g) for g in genre if g) or NOT_AVAILABLE
        if genre:
            return str(genre)
        return NOT_AVAILABLE
