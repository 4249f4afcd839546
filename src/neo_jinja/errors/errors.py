"""neo-jinja error types."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    CONFIG = "CONFIG"
    FILTER = "FILTER"
    INTEGRATION = "INTEGRATION"


@dataclass
class NeoError(Exception):
    """Structured error with context. Base exception for all neo-jinja errors."""

    # Identity
    code: str  # e.g., "CONFIG_INVALID"
    category: ErrorCategory

    # Messages
    message: str  # Human-readable summary
    detail: str | None = None  # Extended explanation
    suggestion: str | None = None  # Actionable fix

    # Context
    filter_name: str | None = None  # Which filter failed

    # Error chain
    cause: "NeoError | None" = None

    # Metadata
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and error reports.

        Returns:
            Dictionary representation of error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "filter_name": self.filter_name,
            "timestamp": self.timestamp.isoformat(),
            "cause": self.cause.to_dict() if self.cause else None,
        }


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    code: str
    category: ErrorCategory
    message_template: str  # "Filter '{filter_name}' failed"
    detail_template: str | None = None
    suggestion_template: str | None = None
