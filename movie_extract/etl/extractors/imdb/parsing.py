"""Shared HTML parsing helpers."""

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from movie_extract.etl.errors import ParseTreeFailure
from movie_extract.etl.types import NOT_AVAILABLE

HTML_PARSER = "html.parser"


def make_soup(html: str, context: str) -> BeautifulSoup:
    """Build a parse tree from raw markup.

    Args:
        html: Raw page body.
        context: Page context for the error message.

    Returns:
        Parsed document.

    Raises:
        ParseTreeFailure: If the markup cannot be parsed.
    """
    try:
        return BeautifulSoup(html, HTML_PARSER)
    except (ParserRejectedMarkup, TypeError, ValueError) as e:
        raise ParseTreeFailure(f"Cannot parse markup for {context}: {e}") from e


def text_or_na(tag: Tag | None) -> str:
    """Return a node's trimmed text content, or the sentinel."""
    if tag is None:
        return NOT_AVAILABLE
    return tag.get_text().strip() or NOT_AVAILABLE
