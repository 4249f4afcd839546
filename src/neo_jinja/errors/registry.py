"""Error registry for creating errors from templates."""

from typing import Any

from .errors import ErrorCategory, ErrorTemplate, NeoError


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, code: str) -> ErrorTemplate | None:
        """Get template by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[str]:
        """List all registered error codes."""
        return list(self._templates.keys())

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
        cause: NeoError | None = None,
    ) -> NeoError:
        """Create error instance from template + context.

        Args:
            code: Error code
            context: Context variables for template interpolation
            cause: Optional cause error

        Returns:
            NeoError instance

        Raises:
            ValueError: If error code not found
        """
        template = self.get_template(code)
        if not template:
            msg = f"Unknown error code: {code}"
            raise ValueError(msg)

        context = context or {}

        message = self._interpolate(template.message_template, context)
        detail = self._interpolate(template.detail_template, context)
        suggestion = self._interpolate(template.suggestion_template, context)

        # A caller-supplied detail wins over the template's generic one
        if context.get("detail"):
            detail = str(context["detail"])

        return NeoError(
            code=template.code,
            category=template.category,
            message=message or f"Error {code}",
            detail=detail,
            suggestion=suggestion,
            filter_name=context.get("filter_name"),
            cause=cause,
        )

    def _interpolate(
        self,
        template: str | None,
        context: dict[str, Any],
    ) -> str | None:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string or None if template is None
        """
        if template is None:
            return None

        try:
            return template.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        self._templates["CONFIG_INVALID"] = ErrorTemplate(
            code="CONFIG_INVALID",
            category=ErrorCategory.CONFIG,
            message_template="Configuration is invalid",
            detail_template="The neo-jinja configuration could not be loaded",
            suggestion_template="Check the configuration file against the documented options",
        )

        self._templates["FILTER_FAILED"] = ErrorTemplate(
            code="FILTER_FAILED",
            category=ErrorCategory.FILTER,
            message_template="Filter '{filter_name}' failed",
            detail_template="A render tree collaborator raised while the filter was running",
            suggestion_template="Enable filters.fail_soft to return an empty result instead",
        )

        self._templates["FILTER_UNKNOWN"] = ErrorTemplate(
            code="FILTER_UNKNOWN",
            category=ErrorCategory.FILTER,
            message_template="Unknown filter '{filter_name}'",
            detail_template="Supported filters: {supported_filters}",
            suggestion_template="Check the filter name for typos",
        )

        self._templates["ENVIRONMENT_UNSUPPORTED"] = ErrorTemplate(
            code="ENVIRONMENT_UNSUPPORTED",
            category=ErrorCategory.INTEGRATION,
            message_template="Cannot register filters on {environment_type}",
            detail_template="The object has no 'filters' mapping",
            suggestion_template="Pass a jinja2.Environment or use create_environment()",
        )
