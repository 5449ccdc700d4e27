"""
Logging configuration for CodeScope.

All package loggers live under the ``codescope`` hierarchy; one call to
``setup_logging`` at app creation wires their output.
"""

import logging
import sys
from typing import Iterable, Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that repeat what RequestLoggingMiddleware already
# records (httpx logs every upstream POST at INFO, uvicorn every request)
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """
    Configure the ``codescope`` logger.

    Calling it again replaces the previous handlers, so the app factory can
    run more than once in a process (tests do).

    Args:
        level: Logging level name; unknown names fall back to INFO
        format_string: Log message format
        log_file: Optional file that receives the same records
        quiet: Loggers raised to WARNING unless ``level`` is DEBUG

    Returns:
        The ``codescope`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    package_logger = logging.getLogger("codescope")
    package_logger.setLevel(numeric_level)
    package_logger.handlers = []

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)

    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``codescope`` hierarchy (the package logger if no name)."""
    if name:
        return logging.getLogger(f"codescope.{name}")
    return logging.getLogger("codescope")
