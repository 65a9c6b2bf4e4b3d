"""ETL utilities package: logging."""

from movie_extract.etl.utils.logger import setup_logger

__all__ = ["setup_logger"]
