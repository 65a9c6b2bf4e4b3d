"""Run log configuration.

Every logger writes to stdout and appends to one shared run log
(``extract.log`` by default), so a run reads as a single timeline:

    [2024-05-01T12:00:00.123Z] Extracted 3/50: Alien
    [2024-05-01T12:00:00.456Z] ERROR: Failed to fetch details: https://... -> 503
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_LOG_FILE = Path("extract.log")

_LOGGERS_CACHE: dict[str, logging.Logger] = {}
_FILE_HANDLERS: dict[Path, logging.FileHandler] = {}


class RunLogFormatter(logging.Formatter):
    """Formats records as ``[<UTC ISO-8601>] <message>``.

    Warnings and errors carry their level name as a message prefix;
    info and debug lines are written bare.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Render the record time as UTC ISO-8601 with milliseconds."""
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            message = f"{record.levelname}: {message}"
        line = f"[{self.formatTime(record)}] {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logger(
    name: str,
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return a logger writing to stdout and the run log.

    Args:
        name: Logger name (e.g., 'etl.imdb').
        level: Logging level (default INFO).
        log_file: Run log path. If None, uses 'extract.log'.

    Returns:
        Configured logger instance.
    """
    if name in _LOGGERS_CACHE:
        return _LOGGERS_CACHE[name]

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = RunLogFormatter()

    logger.addHandler(_create_console_handler(formatter, level))

    file_handler = _get_file_handler(log_file or DEFAULT_LOG_FILE, formatter)
    if file_handler:
        logger.addHandler(file_handler)

    _LOGGERS_CACHE[name] = logger
    return logger


def _create_console_handler(
    formatter: logging.Formatter,
    level: int | str,
) -> logging.StreamHandler:
    """Create console stream handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _get_file_handler(
    log_file: Path,
    formatter: logging.Formatter,
) -> logging.FileHandler | None:
    """Return the append-mode handler shared by every logger of a run log.

    Args:
        log_file: Run log path; parent directories are created.
        formatter: Log formatter.

    Returns:
        Shared FileHandler, or None when the file cannot be opened.
    """
    key = log_file.resolve()
    if key in _FILE_HANDLERS:
        return _FILE_HANDLERS[key]

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not open run log {log_file}: {e}", file=sys.stderr)
        return None

    handler.setFormatter(formatter)
    _FILE_HANDLERS[key] = handler
    return handler
