"""IMDb genre extractor.

Walks the advanced-search listing for a genre page by page,
enriches every listed title from its detail page and stops
once the target count is reached or the catalog runs out.

Failure scopes:
    - listing page fetch/parse failure: run aborted, partial records kept
    - detail page fetch/decode failure: record keeps listing fields
    - malformed listing item: item skipped
"""

import asyncio
import logging

from bs4 import Tag

from movie_extract.etl.errors import ItemExtractionFailure, ParseTreeFailure
from movie_extract.etl.extractors.base import BaseExtractor
from movie_extract.etl.extractors.imdb.client import IMDbClient
from movie_extract.etl.extractors.imdb.listing import ListingParser
from movie_extract.etl.extractors.imdb.structured import StructuredDataExtractor
from movie_extract.etl.extractors.imdb.url_builder import IMDbUrlBuilder
from movie_extract.etl.types import (
    DetailFields,
    ListItem,
    MovieRecord,
    RunResult,
    RunState,
    build_record,
)
from movie_extract.settings import settings


class IMDbExtractor(BaseExtractor):
    """Extracts movie records for one genre from IMDb.

    Requests are strictly sequential; a fixed delay is awaited
    before every detail page request.

    Attributes:
        state: Current traversal state.
    """

    def __init__(
        self,
        client: IMDbClient | None = None,
        url_builder: IMDbUrlBuilder | None = None,
        detail_delay: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            client: HTTP client (defaults to a new IMDbClient).
            url_builder: URL builder (defaults to settings origin/page size).
            detail_delay: Seconds awaited before each detail request.
            logger: Optional logger instance.
        """
        super().__init__("imdb", logger)
        self._client = client or IMDbClient()
        self._url_builder = url_builder or IMDbUrlBuilder(
            settings.imdb.base_url, settings.imdb.page_size
        )
        self._listing = ListingParser(self._url_builder)
        self._structured = StructuredDataExtractor(self.logger)
        self._detail_delay = (
            settings.etl.detail_delay if detail_delay is None else detail_delay
        )
        self.state = RunState.FETCHING_LIST

    # -------------------------------------------------------------------------
    # Main Extraction
    # -------------------------------------------------------------------------

    async def extract(self, genre: str, target: int) -> RunResult:
        """Collect up to ``target`` records for a genre.

        Args:
            genre: Catalog genre token, passed verbatim.
            target: Number of records wanted (> 0).

        Returns:
            RunResult in DONE or ABORTED state.

        Raises:
            ValueError: If target is not positive.
        """
        if target <= 0:
            raise ValueError(f"target must be positive, got {target}")

        self._start_extraction()
        self.logger.info(f"Extracting {target} '{genre}' movies")

        records: list[MovieRecord] = []
        page = 1

        async with self._client:
            while len(records) < target:
                self.state = RunState.FETCHING_LIST
                items = await self._fetch_listing(genre, page)

                if items is None:
                    self.state = RunState.ABORTED
                    break

                if not items:
                    self.logger.info(f"No more movies found on page {page}.")
                    self.state = RunState.DONE
                    break

                self.state = RunState.PARSING_ITEMS
                await self._process_page(items, page, records, target)
                page += 1

        if self.state is not RunState.ABORTED:
            self.state = RunState.DONE

        self._end_extraction()

        return RunResult(
            records=records,
            state=self.state,
            pages_fetched=self.metrics.pages_fetched,
            stats=self.get_stats(),
        )

    # -------------------------------------------------------------------------
    # Listing Pages
    # -------------------------------------------------------------------------

    async def _fetch_listing(self, genre: str, page: int) -> list[Tag] | None:
        """Fetch and split one listing page.

        Args:
            genre: Catalog genre token.
            page: 1-based page number.

        Returns:
            Item nodes, or None when the page could not be fetched or parsed.
        """
        url = self._url_builder.build_search_url(genre, page)
        result = await self._client.fetch(url, f"page {page}")

        if not result.ok:
            self._record_error(f"Failed to fetch list page {page}: {result.failure.message}")
            return None

        self.metrics.pages_fetched += 1

        try:
            return self._listing.parse_page(result.body, page)
        except ParseTreeFailure as e:
            self._record_error(f"Parse error on page {page}: {e}")
            return None

    async def _process_page(
        self,
        items: list[Tag],
        page: int,
        records: list[MovieRecord],
        target: int,
    ) -> None:
        """Turn a page's items into records until the target is reached.

        Args:
            items: Item nodes of the page.
            page: Page number, for logging.
            records: Collected records, appended in place.
            target: Number of records wanted.
        """
        for node in items:
            if len(records) >= target:
                break

            record = await self._process_item(node, page)
            if record is None:
                continue

            records.append(record)
            self._increment_records()
            self.logger.info(f"Extracted {len(records)}/{target}: {record.title}")

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    async def _process_item(self, node: Tag, page: int) -> MovieRecord | None:
        """Parse one listing item and enrich it from its detail page.

        Args:
            node: Listing item node.
            page: Page number, for logging.

        Returns:
            The record, or None when the item itself could not be parsed.
        """
        try:
            item = self._listing.parse_item(node)
        except ItemExtractionFailure as e:
            self.metrics.failed_records += 1
            self._record_error(f"Failed to parse movie on page {page}: {e}")
            return None

        details = await self._enrich(item) if item.detail_url else None
        return build_record(item, details)

    async def _enrich(self, item: ListItem) -> DetailFields | None:
        """Fetch the detail page of an item and decode its structured data.

        Args:
            item: Parsed listing item with a detail URL.

        Returns:
            Detail fields, or None to keep the listing fields.
        """
        self.state = RunState.ENRICHING
        url = item.detail_url

        await asyncio.sleep(self._detail_delay)
        result = await self._client.fetch(url, url)
        self.state = RunState.PARSING_ITEMS

        if not result.ok:
            self.metrics.detail_failures += 1
            self._record_error(f"Failed to fetch details: {url} -> {result.failure.message}")
            return None

        return self._structured.extract(result.body, item.duration, url)
