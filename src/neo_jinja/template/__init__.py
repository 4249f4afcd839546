"""Render tree filters for Jinja2 templates."""

from .extension import create_environment, get_filter, register_filters
from .filters import RenderFilters, fail_soft

__all__ = [
    "RenderFilters",
    "fail_soft",
    "register_filters",
    "create_environment",
    "get_filter",
]
