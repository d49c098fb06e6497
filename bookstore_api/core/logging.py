from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional


# Context variables for enriched logging
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class LoggingContextFilter(logging.Filter):
    """
    Logging filter that injects correlation_id from contextvars and a default
    operation label into each log record so formatters can include them.

    If no values are present, placeholders are used.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        cid = correlation_id_var.get()
        setattr(record, "correlation_id", cid or "-")
        if not getattr(record, "operation", None):
            setattr(record, "operation", "-")
        return True


# PUBLIC_INTERFACE
def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a structured format and context filter."""
    handler = logging.StreamHandler(stream=sys.stdout)
    fmt = (
        "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | op=%(operation)s | "
        "%(message)s"
    )
    formatter = logging.Formatter(fmt=fmt)
    handler.setFormatter(formatter)
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # Remove pre-existing default handlers configured elsewhere (e.g., basicConfig)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)


class OperationLogger:
    """
    Leveled logger for request handlers.

    Every call names the operation explicitly; the label is prefixed to the
    message and attached to the record as `operation`.
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def info(self, operation: str, message: str) -> None:
        self._logger.info("%s: %s", operation, message, extra={"operation": operation})

    def warn(self, operation: str, message: str) -> None:
        self._logger.warning("%s: %s", operation, message, extra={"operation": operation})

    def error(self, operation: str, message: str) -> None:
        self._logger.error("%s: %s", operation, message, extra={"operation": operation})
