"""IMDb listing page parser.

Splits a search results page into summary items and extracts
the fields each summary carries.
"""

from bs4 import Tag

from movie_extract.etl.errors import ItemExtractionFailure
from movie_extract.etl.extractors.imdb.parsing import make_soup, text_or_na
from movie_extract.etl.extractors.imdb.url_builder import IMDbUrlBuilder
from movie_extract.etl.types import NOT_AVAILABLE, ListItem

ITEM_SELECTOR = ".ipc-metadata-list-summary-item"
TITLE_SELECTOR = "h3"
METADATA_SELECTOR = ".dli-title-metadata span"
LINK_SELECTOR = "a.ipc-title-link-wrapper"

# Rich-text plot first, plain plot attribute node second
PLOT_SELECTORS = (
    ".ipc-html-content-inner-div",
    "[data-testid='plot']",
)


class ListingParser:
    """Parses IMDb search result pages."""

    def __init__(self, url_builder: IMDbUrlBuilder) -> None:
        """Initialize parser.

        Args:
            url_builder: Resolves relative title links.
        """
        self._url_builder = url_builder

    def parse_page(self, html: str, page: int) -> list[Tag]:
        """Return the summary item nodes of a listing page.

        Args:
            html: Listing page body.
            page: Page number, for error context.

        Returns:
            Item nodes in page order (empty at end of catalog).

        Raises:
            ParseTreeFailure: If the page markup cannot be parsed.
        """
        soup = make_soup(html, f"page {page}")
        return soup.select(ITEM_SELECTOR)

    def parse_item(self, node: Tag) -> ListItem:
        """Extract the listing fields of one summary node.

        Missing sub-elements map to the sentinel (or no detail URL).

        Args:
            node: One summary item node.

        Returns:
            Parsed list item.

        Raises:
            ItemExtractionFailure: If the node has an unexpected shape.
        """
        try:
            return self._extract_fields(node)
        except (AttributeError, TypeError, KeyError, IndexError, ValueError) as e:
            raise ItemExtractionFailure(f"Malformed listing item: {e}") from e

    def _extract_fields(self, node: Tag) -> ListItem:
        """Read each field independently from the node."""
        spans = node.select(METADATA_SELECTOR)

        return ListItem(
            title=text_or_na(node.select_one(TITLE_SELECTOR)),
            release_year=text_or_na(spans[0]) if len(spans) > 0 else NOT_AVAILABLE,
            duration=text_or_na(spans[1]) if len(spans) > 1 else NOT_AVAILABLE,
            plot_summary=self._extract_plot(node),
            detail_url=self._extract_detail_url(node),
        )

    @staticmethod
    def _extract_plot(node: Tag) -> str:
        """Return the text of the first plot node found."""
        for selector in PLOT_SELECTORS:
            elem = node.select_one(selector)
            if elem is not None:
                return text_or_na(elem)
        return NOT_AVAILABLE

    def _extract_detail_url(self, node: Tag) -> str | None:
        """Resolve the title link to an absolute URL."""
        link = node.select_one(LINK_SELECTOR)
        if link is None:
            return None
        return self._url_builder.build_detail_url(link.get("href"))
