"""Package logger built on Python's logging module."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "tagsafe"

_logger: Optional[logging.Logger] = None
_console_handler: Optional[logging.Handler] = None


def get_logger() -> logging.Logger:
    """Get or create the singleton logger instance."""
    global _logger
    if _logger is not None:
        return _logger

    _logger = logging.getLogger(LOGGER_NAME)

    # Libraries stay quiet unless the application configures logging
    if not _logger.handlers:
        _logger.addHandler(logging.NullHandler())

    return _logger


def enable_console_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    global _console_handler
    logger = get_logger()
    logger.setLevel(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        # Format: [2025-12-07 10:30:00] message
        _console_handler.setFormatter(logging.Formatter(
            "[%(asctime)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(_console_handler)

    _console_handler.setLevel(level)
    return logger
