"""Base loader abstract class.

Provides the common render-then-write flow for loaders that
persist collected records to a file.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from movie_extract.etl.errors import SerializationFailure
from movie_extract.etl.types import MovieRecord
from movie_extract.etl.utils.logger import setup_logger
from movie_extract.settings import settings


@dataclass
class LoaderStats:
    """Statistics for a loader operation.

    Attributes:
        written: Number of records written.
        path: Destination file.
        size_bytes: Size of the written document.
    """

    written: int = 0
    path: Path | None = None
    size_bytes: int = 0


class BaseLoader(ABC):
    """Abstract base class for file loaders.

    The whole document is rendered in memory before the destination
    is touched, so a rendering error never leaves a partial file.

    Attributes:
        name: Loader identifier for logging.
    """

    name: str = "base"

    def __init__(self, path: Path) -> None:
        """Initialize loader with its destination.

        Args:
            path: Output file, overwritten on each load.
        """
        self._path = path
        self._logger = setup_logger(
            f"etl.loader.{self.name}",
            settings.logging.level,
            settings.paths.log_file,
        )
        self._stats = LoaderStats(path=path)

    @property
    def path(self) -> Path:
        """Get the destination file."""
        return self._path

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def stats(self) -> LoaderStats:
        """Get current loader statistics."""
        return self._stats

    @abstractmethod
    def render(self, records: list[MovieRecord]) -> str:
        """Render records as a complete document.

        Args:
            records: Records in output order.

        Returns:
            Document text.
        """
        pass

    def load(self, records: list[MovieRecord]) -> LoaderStats:
        """Render records and overwrite the destination file.

        Args:
            records: Records in output order.

        Returns:
            LoaderStats with operation results.

        Raises:
            SerializationFailure: If the file cannot be written.
        """
        document = self.render(records)
        data = document.encode("utf-8")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(data)
        except OSError as e:
            raise SerializationFailure(f"Failed to save file {self._path}: {e}") from e

        self._stats = LoaderStats(written=len(records), path=self._path, size_bytes=len(data))
        self._logger.info(f"File saved to {self._path}")
        return self._stats
