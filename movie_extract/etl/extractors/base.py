"""Abstract base class for catalog extractors."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from movie_extract.etl.types import RunResult
from movie_extract.etl.utils import setup_logger
from movie_extract.settings import settings


@dataclass
class ExtractionMetrics:
    """Standardized extraction metrics."""

    source_name: str
    total_records: int = 0
    failed_records: int = 0
    detail_failures: int = 0
    pages_fetched: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """Calculate extraction duration in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Share of parsed items that produced a record, as percentage."""
        attempted = self.total_records + self.failed_records
        if attempted == 0:
            return 0.0
        return (self.total_records / attempted) * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary."""
        return {
            "source_name": self.source_name,
            "total_records": self.total_records,
            "failed_records": self.failed_records,
            "detail_failures": self.detail_failures,
            "pages_fetched": self.pages_fetched,
            "success_rate": round(self.success_rate, 2),
            "duration_seconds": round(self.duration_seconds, 2),
            "errors_count": len(self.errors),
        }

    def reset(self) -> None:
        """Reset metrics for new extraction run."""
        self.total_records = 0
        self.failed_records = 0
        self.detail_failures = 0
        self.pages_fetched = 0
        self.start_time = None
        self.end_time = None
        self.errors.clear()


class BaseExtractor(ABC):
    """Abstract base class defining contract for catalog extractors.

    Provides:
        - Metrics tracking (duration, success rate, errors)
        - Logger instance
        - Helper methods for extraction lifecycle
    """

    def __init__(self, source_name: str, logger: logging.Logger | None = None) -> None:
        """Initialize extractor with logging and metrics.

        Args:
            source_name: Name of the data source.
            logger: Optional logger; defaults to the configured ETL logger.
        """
        self.source_name = source_name
        self.metrics = ExtractionMetrics(source_name=source_name)
        self.logger = logger or setup_logger(
            f"etl.{source_name.lower()}",
            settings.logging.level,
            settings.paths.log_file,
        )

    @abstractmethod
    async def extract(self, genre: str, target: int) -> RunResult:
        """Collect up to ``target`` records for a genre.

        Args:
            genre: Catalog genre token.
            target: Number of records wanted.

        Returns:
            RunResult with the collected records.
        """

    def _start_extraction(self) -> None:
        """Initialize metrics at extraction start."""
        self.metrics.reset()
        self.metrics.start_time = datetime.now()
        self.logger.info(f"extraction_started: {self.source_name}")

    def _end_extraction(self) -> None:
        """Finalize metrics at extraction end."""
        self.metrics.end_time = datetime.now()
        self.logger.info(
            f"extraction_ended: {self.source_name} "
            f"({self.metrics.total_records} records, "
            f"{self.metrics.pages_fetched} pages, "
            f"{self.metrics.duration_seconds:.2f}s)"
        )

    def _record_error(self, error_msg: str) -> None:
        """Log an error and keep it in the metrics.

        Args:
            error_msg: Error message to record.
        """
        self.metrics.errors.append(error_msg)
        self.logger.error(error_msg)

    def _increment_records(self, count: int = 1) -> None:
        """Increment total records count.

        Args:
            count: Number of records to add.
        """
        self.metrics.total_records += count

    def get_stats(self) -> dict[str, Any]:
        """Get extraction statistics.

        Returns:
            Dictionary with extraction metrics.
        """
        return self.metrics.to_dict()
