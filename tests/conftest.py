"""Shared pytest fixtures: fake IMDb pages and a routed mock transport."""

import json
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlparse

# Keep test log files out of the working tree; read when settings are first imported
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "movie_extract_test" / "extract.log"))
os.environ.setdefault("ENVIRONMENT", "test")

import httpx  # noqa: E402
import pytest  # noqa: E402

from movie_extract.etl.extractors.imdb import IMDbClient, IMDbExtractor, IMDbUrlBuilder  # noqa: E402

BASE_URL = "https://www.imdb.com"
PAGE_SIZE = 50


# ---------------------------------------------------------------------------
# HTML builders
# ---------------------------------------------------------------------------


def listing_item_html(
    title: str = "The Test Movie",
    year: str | None = "2023",
    duration: str | None = "2h",
    href: str | None = "/title/tt1234567/",
    plot: str | None = "This is a sample plot summary for the movie.",
) -> str:
    """Build one listing summary item like IMDb's advanced search."""
    spans = "".join(f"<span>{value}</span>" for value in (year, duration) if value is not None)
    link = f'<a class="ipc-title-link-wrapper" href="{href}"></a>' if href is not None else ""
    plot_html = f'<div data-testid="plot">{plot}</div>' if plot is not None else ""
    return f"""
        <li class="ipc-metadata-list-summary-item">
          <h3 class="ipc-title__text">{title}</h3>
          <div class="dli-title-metadata">{spans}</div>
          {link}
          {plot_html}
        </li>
    """


def listing_page_html(items: list[str]) -> str:
    """Wrap listing items in a page."""
    return f"<html><body><ul>{''.join(items)}</ul></body></html>"


def ld_json_script(payload: dict[str, Any] | str) -> str:
    """Build a JSON-LD script tag (compact JSON, as IMDb serves it)."""
    content = payload if isinstance(payload, str) else json.dumps(payload, separators=(",", ":"))
    return f'<script type="application/ld+json">{content}</script>'


def detail_page_html(*scripts: str) -> str:
    """Build a detail page embedding the given script tags."""
    return f"<html><head>{''.join(scripts)}</head><body><h1>Detail</h1></body></html>"


def movie_payload(**overrides: Any) -> dict[str, Any]:
    """A Movie JSON-LD object."""
    payload: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Movie",
        "name": "Test JSON Movie",
        "director": {"name": "Jane Doe"},
        "actor": [{"name": "Actor A"}, {"name": "Actor B"}],
        "aggregateRating": {"ratingValue": "8.7"},
        "duration": "PT2H",
        "genre": ["Action", "Thriller"],
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Fake site
# ---------------------------------------------------------------------------


class FakeCatalog:
    """Serves listing pages by ``start`` offset and detail pages by path.

    Attributes:
        pages: Listing page bodies, page 1 first.
        details: Detail page bodies by URL path.
        failing: Paths (or "page:N") answered with HTTP 500.
        requests: Every requested URL, in order.
    """

    def __init__(self) -> None:
        self.pages: list[str] = []
        self.details: dict[str, str] = {}
        self.failing: set[str] = set()
        self.requests: list[httpx.URL] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request.url)
        path = request.url.path

        if path == "/search/title/":
            start = int(parse_qs(urlparse(str(request.url)).query)["start"][0])
            page = (start - 1) // PAGE_SIZE + 1
            if f"page:{page}" in self.failing:
                return httpx.Response(500, text="server error")
            if page <= len(self.pages):
                return httpx.Response(200, text=self.pages[page - 1])
            return httpx.Response(200, text=listing_page_html([]))

        if path in self.failing:
            return httpx.Response(500, text="server error")
        if path in self.details:
            return httpx.Response(200, text=self.details[path])
        return httpx.Response(404, text="not found")

    @property
    def listing_requests(self) -> list[httpx.URL]:
        return [url for url in self.requests if url.path == "/search/title/"]

    @property
    def detail_requests(self) -> list[httpx.URL]:
        return [url for url in self.requests if url.path != "/search/title/"]


@pytest.fixture
def catalog() -> FakeCatalog:
    """An empty fake catalog; tests fill pages and details."""
    return FakeCatalog()


@pytest.fixture
def url_builder() -> IMDbUrlBuilder:
    return IMDbUrlBuilder(BASE_URL, PAGE_SIZE)


@pytest.fixture
def make_extractor(
    catalog: FakeCatalog, url_builder: IMDbUrlBuilder
) -> Callable[..., IMDbExtractor]:
    """Factory for extractors talking to the fake catalog without delay."""

    def _make(detail_delay: float = 0.0) -> IMDbExtractor:
        client = IMDbClient(transport=httpx.MockTransport(catalog.handler))
        return IMDbExtractor(client=client, url_builder=url_builder, detail_delay=detail_delay)

    return _make
