"""Render tree type aliases."""

from collections.abc import MutableMapping
from typing import Any, TypeVar

T = TypeVar("T")

# Keys starting with "#" are properties, everything else names a child.
RenderNode = MutableMapping[Any, Any]

# Collapse-single-to-scalar result shape used by neo_raw and neo_target_entity:
# None when empty, the bare value for one delta, the full collection otherwise.
OneOrMany = T | list[T] | dict[Any, T]

# External filter name -> RenderFilters method name.
FILTER_NAMES: dict[str, str] = {
    "neo_class": "add_class",
    "neo_child_class": "add_child_class",
    "neo_label": "get_field_label",
    "neo_value": "get_field_value",
    "neo_raw": "get_raw_values",
    "neo_target_entity": "get_target_entity",
    "neo_children": "children",
    "neo_field": "render_field",
}
