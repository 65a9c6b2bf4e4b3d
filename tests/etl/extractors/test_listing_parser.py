"""Unit tests for the IMDb listing parser."""

import pytest
from bs4 import BeautifulSoup, NavigableString

from movie_extract.etl.errors import ItemExtractionFailure
from movie_extract.etl.extractors.imdb.listing import ListingParser
from movie_extract.etl.extractors.imdb.url_builder import IMDbUrlBuilder
from movie_extract.etl.types import NOT_AVAILABLE
from tests.conftest import listing_item_html, listing_page_html


@pytest.fixture()
def parser(url_builder: IMDbUrlBuilder) -> ListingParser:
    return ListingParser(url_builder)


def _first_node(parser: ListingParser, item_html: str):
    return parser.parse_page(listing_page_html([item_html]), page=1)[0]


# -------------------------------------------------------------------------
# parse_page()
# -------------------------------------------------------------------------


class TestParsePage:
    @staticmethod
    def test_returns_items_in_order(parser: ListingParser) -> None:
        html = listing_page_html([listing_item_html(title=t) for t in ("A", "B", "C")])
        nodes = parser.parse_page(html, page=1)
        assert [n.select_one("h3").get_text() for n in nodes] == ["A", "B", "C"]

    @staticmethod
    def test_empty_page(parser: ListingParser) -> None:
        assert parser.parse_page(listing_page_html([]), page=4) == []

    @staticmethod
    def test_page_without_list(parser: ListingParser) -> None:
        assert parser.parse_page("<html><body>No results</body></html>", page=1) == []


# -------------------------------------------------------------------------
# parse_item()
# -------------------------------------------------------------------------


class TestParseItem:
    @staticmethod
    def test_full_item(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html()))

        assert item.title == "The Test Movie"
        assert item.release_year == "2023"
        assert item.duration == "2h"
        assert item.plot_summary == "This is a sample plot summary for the movie."
        assert item.detail_url == "https://www.imdb.com/title/tt1234567/"

    @staticmethod
    def test_missing_data_yields_sentinel(parser: ListingParser) -> None:
        node = BeautifulSoup(
            '<div class="ipc-metadata-list-summary-item"></div>', "html.parser"
        ).div
        item = parser.parse_item(node)

        assert item.title == NOT_AVAILABLE
        assert item.release_year == NOT_AVAILABLE
        assert item.duration == NOT_AVAILABLE
        assert item.plot_summary == NOT_AVAILABLE
        assert item.detail_url is None

    @staticmethod
    def test_single_metadata_span(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html(duration=None)))
        assert item.release_year == "2023"
        assert item.duration == NOT_AVAILABLE

    @staticmethod
    def test_title_is_trimmed(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html(title="  1. Alien \n")))
        assert item.title == "1. Alien"

    @staticmethod
    def test_blank_title_is_sentinel(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html(title="   ")))
        assert item.title == NOT_AVAILABLE

    @staticmethod
    def test_rich_text_plot_preferred(parser: ListingParser) -> None:
        html = listing_item_html(plot="Plain plot").replace(
            "</li>",
            '<div class="ipc-html-content-inner-div">Rich <b>plot</b></div></li>',
        )
        item = parser.parse_item(_first_node(parser, html))
        assert item.plot_summary == "Rich plot"

    @staticmethod
    def test_missing_link(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html(href=None)))
        assert item.detail_url is None

    @staticmethod
    def test_empty_href(parser: ListingParser) -> None:
        item = parser.parse_item(_first_node(parser, listing_item_html(href="")))
        assert item.detail_url is None

    @staticmethod
    @pytest.mark.parametrize(
        "item_html",
        [
            "<li class='ipc-metadata-list-summary-item'><span>1999</span></li>",
            "<li class='ipc-metadata-list-summary-item'><h3></h3><a href='/x'>x</a></li>",
            "<li class='ipc-metadata-list-summary-item'><div class='dli-title-metadata'></div></li>",
            "<li class='ipc-metadata-list-summary-item'>text only</li>",
        ],
    )
    def test_never_raises_on_item_shaped_input(parser: ListingParser, item_html: str) -> None:
        item = parser.parse_item(_first_node(parser, item_html))
        assert item.title == NOT_AVAILABLE

    @staticmethod
    def test_unexpected_node_raises_item_failure(parser: ListingParser) -> None:
        with pytest.raises(ItemExtractionFailure):
            parser.parse_item(NavigableString("not a tag"))

    @staticmethod
    def test_unresolvable_link_raises_item_failure(parser: ListingParser) -> None:
        node = _first_node(parser, listing_item_html(href="http://[broken/"))
        with pytest.raises(ItemExtractionFailure):
            parser.parse_item(node)
