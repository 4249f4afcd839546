"""Property/child key handling and nested access for render trees.

A render node is an ordered mapping. Keys starting with "#" carry metadata
about the node itself; all other keys, integer deltas included, name child
render nodes.
"""

import math
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

PROPERTY_PREFIX = "#"


def is_property(key: Any) -> bool:
    """Check whether a key names a property rather than a child.

    Args:
        key: Render node key

    Returns:
        True for string keys starting with "#"
    """
    return isinstance(key, str) and key.startswith(PROPERTY_PREFIX)


def properties(node: Mapping[Any, Any]) -> list[Any]:
    """Return the property keys of a node, in order."""
    return [key for key in node if is_property(key)]


def weight_of(child: Mapping[Any, Any]) -> float:
    """Return the #weight of a child, 0 when missing, not numeric or not finite."""
    weight = child.get("#weight", 0)
    try:
        value = float(weight)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def children(node: Mapping[Any, Any], sort: bool = False) -> list[Any]:
    """Return the child keys of a node.

    Only values that are themselves mappings count as children; scalars and
    None stored under child keys are skipped.

    Args:
        node: Render node
        sort: Order by each child's #weight instead of insertion order

    Returns:
        List of child keys
    """
    keys = [
        key
        for key, value in node.items()
        if not is_property(key) and isinstance(value, Mapping)
    ]
    if sort:
        # sorted() is stable, so equal weights keep insertion order
        keys = sorted(keys, key=lambda key: weight_of(node[key]))
    return keys


def get_value(node: Any, parents: Iterable[Any]) -> Any:
    """Read the value found by descending through `parents`.

    Args:
        node: Root of the tree
        parents: Keys to descend through, outermost first

    Returns:
        The value at the path, or None if a step is missing or not a mapping
    """
    current = node
    for key in parents:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def set_value(node: MutableMapping[Any, Any], parents: Iterable[Any], value: Any) -> None:
    """Write `value` at the path, creating intermediate mappings.

    Missing intermediates and intermediate scalars are replaced with new
    mappings. A read-only mapping on the path stops the write, leaving the
    tree as it was. An empty path leaves the root untouched.

    Args:
        node: Root of the tree
        parents: Keys to descend through, outermost first
        value: Value to store at the last key
    """
    path = list(parents)
    if not path:
        return

    current = node
    for key in path[:-1]:
        child = current.get(key)
        if isinstance(child, Mapping) and not isinstance(child, MutableMapping):
            return
        if not isinstance(child, MutableMapping):
            current[key] = {}
        current = current[key]
    current[path[-1]] = value
