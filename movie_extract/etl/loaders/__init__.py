"""ETL loaders package.

Provides loaders persisting collected records to JSON or CSV files.
"""

from movie_extract.etl.loaders.base import BaseLoader, LoaderStats
from movie_extract.etl.loaders.file import (
    CSV_COLUMNS,
    SUPPORTED_FORMATS,
    CSVLoader,
    JSONLoader,
    get_loader,
)

__all__ = [
    "BaseLoader",
    "LoaderStats",
    "JSONLoader",
    "CSVLoader",
    "CSV_COLUMNS",
    "SUPPORTED_FORMATS",
    "get_loader",
]
