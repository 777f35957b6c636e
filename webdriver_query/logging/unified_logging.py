"""
Unified log format with importance (0-10) for the query tool.

Every line reads: timestamp | level | importance | logger | message.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO, Union

# Default importance (0-10) per standard level when not set explicitly
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = (
    "%(asctime)s | %(levelname)-8s | %(importance)s | %(name)s | %(message)s"
)

# Marks handlers installed by configure_logging so repeated calls replace them.
_HANDLER_MARK = "_webdriver_query_unified"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


def install_unified_record_factory() -> None:
    """
    Install a LogRecord factory that sets 'importance' on every record.

    Importance comes from extra={'importance': N} or is derived from the level.
    """
    old_factory = logging.getLogRecordFactory()
    if getattr(old_factory, _HANDLER_MARK, False):
        return

    def _factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        _set_importance_if_missing(record)
        return record

    setattr(_factory, _HANDLER_MARK, True)
    logging.setLogRecordFactory(_factory)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter for the unified line format.

    Sets importance from the level when the record factory was not installed.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Route the package loggers to one unified-format stream handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: log level name or number
        stream: output stream (stderr by default)

    Returns:
        The installed handler
    """
    if isinstance(level, str):
        name = level.strip().upper()
        if name not in LEVEL_TO_IMPORTANCE:
            raise ValueError(f"Invalid log level: {level}")
        level = logging.getLevelName(name)

    install_unified_record_factory()

    package_logger = logging.getLogger("webdriver_query")
    for existing in list(package_logger.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(create_unified_formatter())
    setattr(handler, _HANDLER_MARK, True)

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler
