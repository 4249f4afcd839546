"""Error factory for creating NeoErrors."""

from typing import Any

from .errors import NeoError
from .registry import ErrorRegistry


class ErrorFactory:
    """Creates NeoErrors from codes and from arbitrary exceptions."""

    def __init__(self, registry: ErrorRegistry | None = None):
        """Initialize error factory.

        Args:
            registry: Error registry (defaults to new ErrorRegistry())
        """
        self.registry = registry or ErrorRegistry()

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> NeoError:
        """Create NeoError directly from code.

        Args:
            code: Error code
            context: Context variables for template interpolation
            **kwargs: Additional context variables

        Returns:
            NeoError instance
        """
        merged_context = dict(context or {})
        merged_context.update(kwargs)

        return self.registry.create(code=code, context=merged_context)

    def from_exception(self, error: Exception, filter_name: str) -> NeoError:
        """Wrap an exception raised inside a filter.

        Args:
            error: Exception raised by a collaborator
            filter_name: External name of the filter that was running

        Returns:
            NeoError with code FILTER_FAILED
        """
        if isinstance(error, NeoError):
            return error

        return self.create(
            "FILTER_FAILED",
            filter_name=filter_name,
            detail=f"{type(error).__name__}: {error}",
        )


# Convenience singleton
_default_factory: ErrorFactory | None = None


def get_error_factory() -> ErrorFactory:
    """Get default error factory singleton.

    Returns:
        Default ErrorFactory instance
    """
    global _default_factory  # noqa: PLW0603
    if _default_factory is None:
        _default_factory = ErrorFactory()
    return _default_factory


def create_error(code: str, **context: Any) -> NeoError:
    """Convenience function to create error.

    Args:
        code: Error code
        **context: Context variables for template interpolation

    Returns:
        NeoError instance
    """
    return get_error_factory().create(code, context)
