"""Shared types for neo-jinja.

Import from here rather than submodules:
    from neo_jinja.types import LogLevel, RenderNode, ContentEntity
"""

from .collaborators import (
    BaseFieldDefinition,
    ContentEntity,
    FieldItemList,
    Link,
    ThirdPartySettings,
    TypedData,
    Url,
)
from .enums import LogFormat, LogLevel
from .render import FILTER_NAMES, OneOrMany, RenderNode
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "LogLevel",
    "LogFormat",
    # Render tree
    "RenderNode",
    "OneOrMany",
    "FILTER_NAMES",
    # Collaborators
    "BaseFieldDefinition",
    "ThirdPartySettings",
    "TypedData",
    "FieldItemList",
    "ContentEntity",
    "Link",
    "Url",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
