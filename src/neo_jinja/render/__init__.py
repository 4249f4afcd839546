"""Render tree primitives."""

from .element import (
    PROPERTY_PREFIX,
    children,
    get_value,
    is_property,
    properties,
    set_value,
    weight_of,
)

__all__ = [
    "PROPERTY_PREFIX",
    "children",
    "get_value",
    "is_property",
    "properties",
    "set_value",
    "weight_of",
]
