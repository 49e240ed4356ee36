"""Logging setup for the industry match tool.

Modules log through `logging.getLogger(__name__)`; configuring the package
logger here routes all of them to one console handler.
"""

import logging
import sys
from typing import TextIO

# Root of every module logger in the package ("src")
PACKAGE_LOGGER = __name__.split(".")[0]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "industry-match-console"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: str | int | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger and return it.

    The console handler is installed on the first call; later calls only
    change the level.

    Args:
        level: Log level name or number. Defaults to INFO.
        stream: Output stream for a newly installed handler (stderr by default).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    handler = _console_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    handler.setLevel(log_level)

    return logger


def reset_logging() -> None:
    """Remove the console handler and reset the level (useful for testing)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _console_handler(logger)
    if handler is not None:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
