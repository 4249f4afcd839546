"""Structured logging with OTEL trace context.

Usage:
    from neo_jinja.logging import get_logger

    logger = get_logger("filters")
    logger.warning("Filter recovered", filter_name="neo_raw")
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from opentelemetry import trace

from neo_jinja.types import LogFormat, LogLevel

ROOT_LOGGER_NAME = "neo_jinja"

_RESERVED_RECORD_FIELDS = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    )
)

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a recording span is active)
    - additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_FIELDS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class NeoLogger:
    """Thin wrapper over a stdlib logger taking structured keyword fields."""

    def __init__(self, name: str):
        """Initialize logger.

        Args:
            name: Component name, nested under the neo_jinja logger
        """
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)


# Logger cache
_loggers: dict[str, NeoLogger] = {}


def get_logger(name: str) -> NeoLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (component name)

    Returns:
        NeoLogger instance
    """
    if name not in _loggers:
        _loggers[name] = NeoLogger(name)
    return _loggers[name]


def reset_loggers() -> None:
    """Reset logger cache (for testing)."""
    global _loggers
    _loggers = {}


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    log_format: LogFormat = LogFormat.JSON,
    stream: Any = None,
) -> logging.Logger:
    """Attach a single handler to the neo_jinja root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Minimum level to emit
        log_format: JSON (structured) or plain text lines
        stream: Output stream (defaults to stderr)

    Returns:
        The configured root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_neo_jinja", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format == LogFormat.JSON:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._neo_jinja = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(_LEVELS[LogLevel(level)])
    return root
