"""ETL data types."""

from movie_extract.etl.types.movie import (
    NOT_AVAILABLE,
    DetailFields,
    ListItem,
    MovieRecord,
    build_record,
)
from movie_extract.etl.types.pipeline import FetchResult, RunResult, RunState

__all__ = [
    # Movie
    "NOT_AVAILABLE",
    "MovieRecord",
    "ListItem",
    "DetailFields",
    "build_record",
    # Pipeline
    "RunState",
    "FetchResult",
    "RunResult",
]
