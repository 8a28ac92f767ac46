"""Logging setup shared by the scanner core and the compscan CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "compscan"
_CONSOLE_FORMAT = "[compscan] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Library use stays silent until configure_logging is called.
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``compscan.<name>``, or the package logger when no name is given."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send compscan logs to stderr (debug when verbose) and optionally to ``log_file``."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
