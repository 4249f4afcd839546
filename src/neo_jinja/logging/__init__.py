"""neo-jinja logging - Structured JSON logging with trace context."""

from .logger import (
    NeoLogger,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
    reset_loggers,
)

__all__ = [
    "NeoLogger",
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
    "reset_loggers",
]
