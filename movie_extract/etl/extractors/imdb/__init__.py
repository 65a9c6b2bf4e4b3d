"""IMDb genre listing extraction.

Exports:
    IMDbExtractor: Paginated listing traversal with detail enrichment.
    IMDbClient: HTTP client reporting failures as values.
    ListingParser: Listing page and item parser.
    StructuredDataExtractor: JSON-LD Movie block decoder.
    IMDbUrlBuilder: Listing and detail URL builder.
"""

from movie_extract.etl.extractors.imdb.client import IMDbClient
from movie_extract.etl.extractors.imdb.extractor import IMDbExtractor
from movie_extract.etl.extractors.imdb.listing import ListingParser
from movie_extract.etl.extractors.imdb.structured import StructuredDataExtractor
from movie_extract.etl.extractors.imdb.url_builder import IMDbUrlBuilder

__all__ = [
    "IMDbExtractor",
    "IMDbClient",
    "ListingParser",
    "StructuredDataExtractor",
    "IMDbUrlBuilder",
]
