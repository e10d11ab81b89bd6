"""
Logging configuration for the application.

One stdout handler with a pipe-separated format. Logging must not
change program behavior and never includes passwords: user records
are logged by id and username only.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver loggers that are only useful when debugging them.
QUIET_LOGGERS = ("pymongo", "pymongo.command", "pymongo.connection")

# Loggers that print raw request lines, path parameters included.
SILENCED_LOGGERS = ("uvicorn.access",)


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the whole process.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
    """
    resolved = resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    quiet_level = logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    for name in SILENCED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
