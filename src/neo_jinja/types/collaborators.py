"""Protocols for the framework objects the filters read.

None of these are implemented here. The entity, field and link objects are
owned by the host application; the filters only test for the capabilities
below and call them.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BaseFieldDefinition(Protocol):
    """Field definition declared in code.

    Used by:
    - RenderFilters.get_field_label (settings["field_labels"]["display_label"])
    """

    def is_base_field(self) -> bool:
        """Return True for fields defined in code rather than configuration."""
        ...

    def get_settings(self) -> Mapping[str, Any]:
        """Return the field settings mapping."""
        ...


@runtime_checkable
class ThirdPartySettings(Protocol):
    """Configurable definition carrying settings owned by other modules."""

    def get_third_party_setting(self, module: str, key: str, default: Any = None) -> Any:
        """Return the setting stored by `module` under `key`."""
        ...


@runtime_checkable
class TypedData(Protocol):
    """Typed data collection stored under a field node's #items.

    get_value() returns raw values per delta, either as a list (delta is the
    index) or as a mapping of delta -> raw value mapping.
    """

    def get_value(self) -> Any:
        ...

    def get_field_definition(self) -> Any:
        ...


@runtime_checkable
class FieldItemList(Protocol):
    """Field items of one entity field.

    Iterating yields field items; reference items expose an `entity`
    attribute pointing at the referenced entity.
    """

    def __iter__(self) -> Any:
        ...

    def view(self, view_mode: str) -> Any:
        """Build the render node of the field for a view mode."""
        ...


@runtime_checkable
class ContentEntity(Protocol):
    """Content entity exposing named fields."""

    def has_field(self, field_name: str) -> bool:
        ...

    def get(self, field_name: str) -> Iterable[Any]:
        ...


@runtime_checkable
class Url(Protocol):
    """Routed URL carrying link options (attributes, query, fragment)."""

    def get_options(self) -> dict[str, Any]:
        ...

    def set_options(self, options: dict[str, Any]) -> Any:
        ...


@runtime_checkable
class Link(Protocol):
    """Link value object: a text plus a Url."""

    def get_url(self) -> Url:
        ...
