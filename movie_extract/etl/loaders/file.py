"""JSON and CSV file loaders for movie records."""

import json
from pathlib import Path

from movie_extract.etl.errors import SerializationFailure
from movie_extract.etl.loaders.base import BaseLoader
from movie_extract.etl.types import MovieRecord
from movie_extract.settings import settings

JSON_FORMAT = "json"
CSV_FORMAT = "csv"
SUPPORTED_FORMATS = (JSON_FORMAT, CSV_FORMAT)

CSV_COLUMNS = (
    "title",
    "releaseYear",
    "rating",
    "duration",
    "genreTags",
    "plotSummary",
    "directors",
    "cast",
)

# Columns wrapped in double quotes; the others are written raw
QUOTED_COLUMNS = frozenset({"title", "genreTags", "plotSummary", "directors", "cast"})


class JSONLoader(BaseLoader):
    """Writes records as a pretty-printed JSON array."""

    name = "json"

    def render(self, records: list[MovieRecord]) -> str:
        """Render records as an indented JSON array."""
        return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)


class CSVLoader(BaseLoader):
    """Writes records as a CSV table.

    ``plotSummary`` has its double quotes replaced by single quotes
    before quoting; this is lossy and intentional.
    """

    name = "csv"

    def render(self, records: list[MovieRecord]) -> str:
        """Render the header plus one row per record, newline-separated."""
        lines = [",".join(CSV_COLUMNS)]
        lines.extend(self._render_row(record.to_dict()) for record in records)
        return "\n".join(lines)

    @staticmethod
    def _render_row(row: dict[str, str]) -> str:
        cells = []
        for column in CSV_COLUMNS:
            value = row[column]
            if column == "plotSummary":
                value = value.replace('"', "'")
            if column in QUOTED_COLUMNS:
                value = _quote(value)
            cells.append(value)
        return ",".join(cells)


def _quote(value: str) -> str:
    """Wrap in double quotes, doubling embedded ones."""
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def get_loader(output_format: str, output_dir: Path | None = None) -> BaseLoader:
    """Return the loader for an output format.

    Args:
        output_format: "json" or "csv".
        output_dir: Directory override (defaults to settings).

    Returns:
        Loader targeting output.json or output.csv.

    Raises:
        SerializationFailure: If the format is not supported.
    """
    if output_format not in SUPPORTED_FORMATS:
        raise SerializationFailure(
            f"Unsupported format '{output_format}'. Valid: {SUPPORTED_FORMATS}"
        )

    paths = settings.paths
    base_dir = output_dir if output_dir is not None else paths.output_dir

    if output_format == JSON_FORMAT:
        return JSONLoader(base_dir / paths.json_output_path.name)
    return CSVLoader(base_dir / paths.csv_output_path.name)
