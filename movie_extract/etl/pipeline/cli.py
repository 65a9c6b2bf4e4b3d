"""Command Line Interface for the extraction pipeline.

Usage:
    python -m movie_extract run <genre> <count> [csv]
"""

import argparse
import asyncio
import sys

from movie_extract.etl.errors import SerializationFailure, UsageError
from movie_extract.etl.pipeline.orchestrator import run_pipeline
from movie_extract.etl.utils import setup_logger
from movie_extract.settings import settings

logger = setup_logger("etl.pipeline.cli", settings.logging.level, settings.paths.log_file)

USAGE = (
    "Usage: python -m movie_extract run <genre> <count> [csv]\n"
    "Example: python -m movie_extract run comedy 50 csv"
)


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Positional arguments are optional at the argparse level so that
    missing values are reported as a UsageError like invalid ones.

    Returns:
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="movie_extract",
        description="Extract IMDb movies of a genre to JSON or CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m movie_extract run horror 20          # output.json
  python -m movie_extract run comedy 50 csv      # output.csv
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    run_parser = subparsers.add_parser("run", help="Extract and save movies")
    run_parser.add_argument("genre", nargs="?", help="Genre token, e.g. comedy")
    run_parser.add_argument("count", nargs="?", help="Number of movies (> 0)")
    run_parser.add_argument("format", nargs="?", default=None, help="'csv' for CSV, JSON otherwise")

    return parser


def parse_count(raw: str | None) -> int:
    """Validate the target count argument.

    Args:
        raw: Raw command line value.

    Returns:
        Positive integer count.

    Raises:
        UsageError: If missing, non-numeric or not positive.
    """
    if raw is None:
        raise UsageError("Missing <count>")
    try:
        count = int(raw)
    except ValueError as e:
        raise UsageError(f"<count> must be an integer, got '{raw}'") from e
    if count <= 0:
        raise UsageError(f"<count> must be positive, got {count}")
    return count


def resolve_format(raw: str | None) -> str:
    """Map the optional third argument to an output format."""
    return "csv" if raw == "csv" else "json"


# =============================================================================
# COMMAND HANDLERS
# =============================================================================


def _handle_run(args: argparse.Namespace) -> None:
    """Handle the run command.

    Args:
        args: Parsed arguments.

    Raises:
        UsageError: On invalid genre or count.
    """
    if not args.genre:
        raise UsageError("Missing <genre>")

    count = parse_count(args.count)
    output_format = resolve_format(args.format)

    result = asyncio.run(run_pipeline(args.genre, count, output_format))
    logger.info(
        f"Run {result.run.state.value}: {len(result.run.records)}/{count} "
        f"movies saved to {result.output.path}"
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Exit status: 0 on save (partial runs included), 1 on usage or
    serialization error, 130 on interrupt.

    Args:
        argv: Arguments (defaults to sys.argv[1:]).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command != "run":
        parser.print_help()
        sys.exit(1)

    try:
        _handle_run(args)
    except UsageError as e:
        logger.error(f"{e}\n{USAGE}")
        sys.exit(1)
    except SerializationFailure as e:
        logger.error(f"Failed to save file: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("⚠️ Interrupted by user")
        sys.exit(130)

    sys.exit(0)


if __name__ == "__main__":
    main()
