"""neo-jinja configuration data models."""

from dataclasses import dataclass, field

from neo_jinja.types import FILTER_NAMES, LogFormat, LogLevel


@dataclass
class FiltersConfig:
    """Filter registration and behaviour."""

    enabled: list[str] = field(default_factory=lambda: list(FILTER_NAMES))
    fail_soft: bool = True  # False re-raises collaborator errors as NeoError
    default_attribute_key: str = "attributes"
    # Searched in order for the entity owning a field node
    parent_object_keys: list[str] = field(
        default_factory=lambda: ["#object", "#field_collection_item"]
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON


@dataclass
class NeoConfig:
    """Root configuration."""

    filters: FiltersConfig = field(default_factory=FiltersConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
