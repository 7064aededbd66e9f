"""
Central logging configuration.
Creates file and console handlers with support for TRACE/INFO/WARNING/ERROR levels.
"""
from __future__ import annotations

import functools
import logging
import os
import time
from typing import Any, Callable, Optional, TypeVar

from visconti_admin.core.config import settings

F = TypeVar("F", bound=Callable[..., Any])

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_LEVEL_NAMES = {
    "TRACE": TRACE_LEVEL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def trace(self: logging.Logger, message: str, *args, **kwargs) -> None:
    """Emit a TRACE-level message on the logger instance."""
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


logging.Logger.trace = trace  # type: ignore[attr-defined]


class LogLevelFilter(logging.Filter):
    """Filter log records to an allowed set of levels."""

    def __init__(self, allowed_levels: set[int]) -> None:
        super().__init__()
        self._allowed_levels = allowed_levels

    def filter(self, record: logging.LogRecord) -> bool:
        """Return True when the record level is allowed."""
        return record.levelno in self._allowed_levels


def parse_allowed_levels(raw: Optional[str]) -> set[int]:
    """Parse a comma separated list of level names into numeric values."""
    default_levels = set(_LEVEL_NAMES.values())
    if not raw:
        return default_levels

    levels: set[int] = set()
    for level_name in raw.split(","):
        normalized = level_name.strip().upper()
        if normalized in _LEVEL_NAMES:
            levels.add(_LEVEL_NAMES[normalized])
    return levels or default_levels


def resolve_level(level_name: Optional[str]) -> int:
    """Resolve the configured log level string to its numeric value."""
    if not level_name:
        return logging.INFO
    normalized = level_name.strip().upper()
    if normalized == "TRACE":
        return TRACE_LEVEL
    return getattr(logging, normalized, logging.INFO)


def configure_logging() -> None:
    """Configure root logger with console + file handlers."""
    log_dir = os.path.dirname(settings.LOG_FILE_PATH)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(settings.LOG_LEVEL))
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    level_filter = LogLevelFilter(parse_allowed_levels(settings.LOG_LEVELS))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(level_filter)

    file_handler = logging.FileHandler(settings.LOG_FILE_PATH)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(level_filter)

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)


def log_api_timing(func: F) -> F:
    """
    Decorator to log the execution time of outbound API calls.
    Expects the wrapped method to take (self, method, path, ...) and logs
    the method, the path and the duration in milliseconds.
    """
    @functools.wraps(func)
    def wrapper(self, method: str, path: str, *args, **kwargs):
        logger = logging.getLogger(func.__module__)
        start_time = time.perf_counter()
        try:
            result = func(self, method, path, *args, **kwargs)
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "API_CALL | %s %s | duration=%.3fms",
                method,
                path,
                elapsed_ms,
            )
            return result
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "API_CALL | %s %s | duration=%.3fms | error=%s",
                method,
                path,
                elapsed_ms,
                str(e),
            )
            raise
    return wrapper  # type: ignore[return-value]
