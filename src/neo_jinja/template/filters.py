"""Render tree filter implementations.

Every filter is total: input of the wrong shape gives None, an empty dict or
the unchanged node. Errors raised by framework objects while a filter runs
are logged and swallowed unless fail_soft is disabled.
"""

import functools
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import Any

from neo_jinja.config import FiltersConfig
from neo_jinja.errors import get_error_factory
from neo_jinja.logging import get_logger
from neo_jinja.render import element
from neo_jinja.types import (
    FILTER_NAMES,
    BaseFieldDefinition,
    ContentEntity,
    FieldItemList,
    Link,
    OneOrMany,
    RenderNode,
    ThirdPartySettings,
    TypedData,
)

logger = get_logger("filters")

# Raised by framework objects handed an unexpected tree
_RECOVERABLE_ERRORS = (AttributeError, LookupError, TypeError, ValueError)


def _unchanged(node: Any) -> Any:
    return node


def _nothing(node: Any) -> None:
    return None


def _empty(node: Any) -> dict[Any, Any]:
    return {}


def fail_soft(filter_name: str, fallback: Callable[[Any], Any]) -> Callable[..., Any]:
    """Decorate a RenderFilters method so collaborator errors never escape.

    Args:
        filter_name: External filter name, used in logs and errors
        fallback: Builds the neutral result from the node argument
    """

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def wrapper(self: "RenderFilters", node: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return method(self, node, *args, **kwargs)
            except _RECOVERABLE_ERRORS as e:
                if not self.config.fail_soft:
                    raise get_error_factory().from_exception(e, filter_name) from e
                logger.warning(
                    "Filter returned its empty result after an error",
                    filter_name=filter_name,
                    error=f"{type(e).__name__}: {e}",
                )
                return fallback(node)

        return wrapper

    return decorator


def _as_class_list(value: Any) -> list[Any]:
    """Normalize a class value to a list (None -> [], scalar -> [scalar])."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _collapse(values: list[Any] | dict[Any, Any]) -> OneOrMany[Any] | None:
    """Unwrap a single value; keep two or more as the whole collection.

    Template authors get a scalar for single-value fields and a collection
    for multi-value fields, None when there is nothing.
    """
    if len(values) > 1:
        return values
    if not values:
        return None
    if isinstance(values, dict):
        return next(iter(values.values()))
    return values[0]


def _split_path(key: Any) -> tuple[list[Any], str] | None:
    """Split a class key into (parents, property name)."""
    if isinstance(key, str):
        parents, name = [], key
    elif isinstance(key, Sequence) and key:
        parents, name = list(key[:-1]), str(key[-1])
    else:
        return None

    if not name.startswith(element.PROPERTY_PREFIX):
        name = element.PROPERTY_PREFIX + name
    return parents, name


class RenderFilters:
    """The neo_* template filters, bound to one configuration.

    Usage:
        filters = RenderFilters()
        environment.filters.update(filters.as_filters())
    """

    def __init__(self, config: FiltersConfig | None = None):
        """Initialize filters.

        Args:
            config: Filter configuration (defaults to FiltersConfig())
        """
        self.config = config or FiltersConfig()

    def as_filters(self) -> dict[str, Callable[..., Any]]:
        """Map each enabled external filter name to its bound method."""
        return {name: getattr(self, FILTER_NAMES[name]) for name in self.config.enabled}

    # Classes

    @fail_soft("neo_class", _unchanged)
    def add_class(self, node: Any, classes: Any, key: Any = None) -> Any:
        """Add classes to a render node, or to a node nested inside it.

        Args:
            node: Render node or link object
            classes: A class name or a list of class names
            key: Property name ("attributes"), or a list of child keys ending
                 with the property name (["content", "image", "attributes"])

        Returns:
            The node, with the classes appended to <property>["class"]
        """
        if not node:
            return node

        class_list = _as_class_list(classes)

        if isinstance(node, Link):
            url = node.get_url()
            options = dict(url.get_options() or {})
            attributes = dict(options.get("attributes") or {})
            attributes["class"] = _as_class_list(attributes.get("class")) + class_list
            options["attributes"] = attributes
            url.set_options(options)
            return node

        if not isinstance(node, MutableMapping):
            return node

        path = _split_path(self.config.default_attribute_key if key is None else key)
        if path is None:
            return node
        parents, name = path

        target = element.get_value(node, parents)
        if not target or not isinstance(target, MutableMapping):
            logger.debug("No render node at class path", path=[*parents, name])
            return node

        if target.get(name) is None:
            target[name] = {}
        holder = target[name]
        if not isinstance(holder, MutableMapping):
            return node
        holder["class"] = _as_class_list(holder.get("class")) + class_list

        # Link elements render classes from #options, not #attributes
        if target.get("#type") == "link":
            options = target.get("#options")
            if not isinstance(options, MutableMapping):
                options = {}
            link_attributes = options.get("attributes")
            if not isinstance(link_attributes, MutableMapping):
                link_attributes = {}
            link_attributes["class"] = _as_class_list(link_attributes.get("class")) + list(
                holder["class"]
            )
            options["attributes"] = link_attributes
            target["#options"] = options

        element.set_value(node, parents, target)
        return node

    @fail_soft("neo_child_class", _unchanged)
    def add_child_class(self, node: Any, classes: Any, key: Any = None) -> Any:
        """Add classes to every child of a render node.

        Args:
            node: Render node
            classes: A class name or a list of class names
            key: Same as for add_class, applied relative to each child

        Returns:
            The node with each child updated
        """
        if not node or not isinstance(node, MutableMapping):
            return node

        for child in element.children(node):
            node[child] = self.add_class(node[child], classes, key)
        return node

    # Fields

    def is_field_render_node(self, node: Any) -> bool:
        """Check whether a node is the render node of a field."""
        return isinstance(node, Mapping) and node.get("#theme") == "field"

    @fail_soft("neo_label", _nothing)
    def get_field_label(self, node: Any) -> Any:
        """Return the display label of a field render node.

        Lookup order:
        1. Base field setting field_labels.display_label
        2. field_labels third party setting, unless #field_label_default is set
        3. #title
        The first two are exclusive: a base field never consults third party
        settings.

        Args:
            node: Render node of a field

        Returns:
            The label, or None if node is not a field or has no label
        """
        if not self.is_field_render_node(node):
            return None

        items = node.get("#items")
        if isinstance(items, TypedData):
            definition = items.get_field_definition()
            if isinstance(definition, BaseFieldDefinition) and definition.is_base_field():
                label = element.get_value(
                    definition.get_settings(), ["field_labels", "display_label"]
                )
                if label:
                    return label
            elif isinstance(definition, ThirdPartySettings) and not node.get(
                "#field_label_default"
            ):
                label = definition.get_third_party_setting("field_labels", "display_label")
                if label:
                    return label

        return node.get("#title")

    @fail_soft("neo_value", _nothing)
    def get_field_value(self, node: Any) -> dict[Any, RenderNode] | None:
        """Return the field item render nodes of a field, keyed by delta.

        Reads the node's children, not #items.

        Args:
            node: Render node of a field

        Returns:
            Ordered dict delta -> item render node, None when there are none
        """
        if not self.is_field_render_node(node):
            return None

        deltas = element.children(node)
        if not deltas:
            return None
        return {delta: node[delta] for delta in deltas}

    @fail_soft("neo_raw", _nothing)
    def get_raw_values(self, node: Any, key: str = "") -> OneOrMany[Any] | None:
        """Return raw field item values.

        Args:
            node: Render node of a field
            key: Property of each raw value to return ("value", "target_id",
                 ...); the whole raw value when empty

        Returns:
            The single value for one delta, dict delta -> value for more,
            None when the field has no values
        """
        if not self.is_field_render_node(node):
            return None

        items = node.get("#items")
        if not isinstance(items, TypedData):
            return None

        item_values = items.get_value()
        if not item_values:
            return None

        if isinstance(item_values, Mapping):
            pairs = item_values.items()
        else:
            pairs = enumerate(item_values)

        raw_values: dict[Any, Any] = {}
        for delta, values in pairs:
            if key:
                raw_values[delta] = values.get(key) if isinstance(values, Mapping) else None
            else:
                raw_values[delta] = values

        return _collapse(raw_values)

    @fail_soft("neo_target_entity", _nothing)
    def get_target_entity(self, node: Any) -> OneOrMany[Any] | None:
        """Return the entities referenced by a reference field.

        Suitable for image, file and taxonomy term fields.

        Args:
            node: Render node of a field

        Returns:
            The single referenced entity, a list of them, or None
        """
        if not self.is_field_render_node(node):
            return None

        field_name = node.get("#field_name")
        if field_name is None:
            return None

        parent_key = self._parent_object_key(node)
        if parent_key is None:
            return None

        parent = node[parent_key]
        entities = []
        for item in parent.get(field_name):
            entity = getattr(item, "entity", None)
            if entity is not None:
                entities.append(entity)

        return _collapse(entities)

    def _parent_object_key(self, node: Mapping[Any, Any]) -> str | None:
        """Return the property holding the entity that owns the field.

        Different field types use different property names.
        """
        for option in self.config.parent_object_keys:
            if node.get(option) is not None:
                return option
        return None

    # Structure

    @fail_soft("neo_children", _empty)
    def children(self, node: Any, sort: bool = False) -> dict[Any, Any]:
        """Return only the children of a render node.

        Args:
            node: Render node
            sort: Order children by #weight (stable, missing weight is 0)

        Returns:
            New dict of child key -> child render node
        """
        if not isinstance(node, Mapping):
            return {}
        return {key: node[key] for key in element.children(node, sort=sort)}

    @fail_soft("neo_field", _nothing)
    def render_field(self, node: Any, field_id: str) -> Any:
        """Render one field of the entity found in an entity render node.

        Args:
            node: Render node of an entity, carrying #view_mode
            field_id: Machine name of the field to render

        Returns:
            The field's render node for the node's view mode, or None
        """
        if not isinstance(node, Mapping) or not node.get("#view_mode"):
            return None

        entity = next((value for value in node.values() if isinstance(value, ContentEntity)), None)
        if entity is None:
            return None
        if not entity.has_field(field_id):
            return None

        items = entity.get(field_id)
        if not isinstance(items, FieldItemList):
            return None
        return items.view(node["#view_mode"])
