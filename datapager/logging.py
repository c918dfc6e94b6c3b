"""
Logging configuration.

Console logging with contextual fields (resource, operation, ...) bound per
request through a context variable.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any

from datapager.settings import app_settings

# Context variable for storing request-specific logging context
log_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "log_context", default=None
)


def set_log_context(**kwargs: Any) -> None:
    """
    Set contextual fields for logging.

    Fields are added to every log message emitted within the current
    context (asyncio task or thread).

    Args:
        **kwargs: Key-value pairs to add to log context.

    Example:
        >>> set_log_context(resource="Book", operation="get")
        >>> logger.info("Paginating")  # Will include resource and operation
    """
    current = dict(log_context.get() or {})
    current.update(kwargs)
    log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """
    Get current log context.

    Returns:
        Dictionary of contextual log fields.
    """
    return dict(log_context.get() or {})


def clear_log_context() -> None:
    """Clear the log context (useful at end of request)."""
    log_context.set(None)


class ContextFormatter(logging.Formatter):
    """Console formatter prefixing messages with the bound context fields."""

    FMT = "%(asctime)s - [%(context)s] %(levelname)s: %(module)s.%(funcName)s:%(lineno)d - %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FMT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        context = get_log_context()
        record.context = (
            " ".join(f"{k}={v}" for k, v in context.items()) if context else "-"
        )
        return super().format(record)


def setup_logging() -> logging.Logger:
    """
    Configure the datapager logger with a console handler.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("datapager")
    logger.setLevel(getattr(logging, app_settings.LOG_LEVEL.upper()))

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ContextFormatter())
    logger.addHandler(console_handler)

    return logger


# Create default logger instance
logger = setup_logging()
