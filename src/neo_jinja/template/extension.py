"""Jinja2 integration: install the neo_* filters into an environment."""

from collections.abc import MutableMapping
from typing import Any

from jinja2 import Environment

from neo_jinja.config import NeoConfig
from neo_jinja.errors import create_error
from neo_jinja.logging import configure_logging, get_logger
from neo_jinja.types import FILTER_NAMES

from .filters import RenderFilters

logger = get_logger("extension")


def get_filter(name: str, config: NeoConfig | None = None) -> Any:
    """Look up one filter callable by its external name.

    Args:
        name: External filter name, e.g. "neo_label"
        config: Optional configuration

    Returns:
        The bound filter method

    Raises:
        NeoError(FILTER_UNKNOWN) if the name is unknown or disabled
    """
    config = config or NeoConfig()
    filters = RenderFilters(config.filters).as_filters()
    if name not in filters:
        raise create_error(
            "FILTER_UNKNOWN",
            filter_name=name,
            supported_filters=", ".join(filters) or "(none enabled)",
        )
    return filters[name]


def register_filters(environment: Any, config: NeoConfig | None = None) -> RenderFilters:
    """Install the enabled filters into a template environment.

    Args:
        environment: jinja2.Environment, or anything with a `filters` mapping
        config: Optional configuration

    Returns:
        The RenderFilters instance backing the installed callables

    Raises:
        NeoError(ENVIRONMENT_UNSUPPORTED) if there is no filters mapping
    """
    target = getattr(environment, "filters", None)
    if not isinstance(target, MutableMapping):
        raise create_error(
            "ENVIRONMENT_UNSUPPORTED",
            environment_type=type(environment).__name__,
        )

    config = config or NeoConfig()
    render_filters = RenderFilters(config.filters)
    installed = render_filters.as_filters()
    target.update(installed)

    logger.debug(
        "Registered render filters",
        filters=sorted(installed),
        disabled=sorted(set(FILTER_NAMES) - set(installed)),
    )
    return render_filters


def create_environment(config: NeoConfig | None = None, **options: Any) -> Environment:
    """Create a jinja2.Environment with the filters installed.

    Passing a config also applies its logging section to the neo_jinja
    loggers.

    Args:
        config: Optional configuration
        **options: Passed to jinja2.Environment (loader, autoescape, ...)

    Returns:
        Configured environment
    """
    if config is not None:
        configure_logging(config.logging.level, config.logging.format)

    environment = Environment(**options)
    register_filters(environment, config)
    return environment
