"""ETL extractors package.

Classes:
    BaseExtractor: Abstract base for all extractors.
    IMDbExtractor: IMDb genre listing extractor.
"""

from movie_extract.etl.extractors.base import BaseExtractor, ExtractionMetrics
from movie_extract.etl.extractors.imdb import IMDbClient, IMDbExtractor

__all__ = [
    # Base
    "BaseExtractor",
    "ExtractionMetrics",
    # IMDb
    "IMDbExtractor",
    "IMDbClient",
]
