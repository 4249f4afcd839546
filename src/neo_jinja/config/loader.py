"""neo-jinja configuration loader."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from neo_jinja.errors import create_error
from neo_jinja.logging import get_logger
from neo_jinja.types import (
    FILTER_NAMES,
    LogFormat,
    LogLevel,
    ValidationIssue,
    ValidationResult,
)

from .models import FiltersConfig, LoggingConfig, NeoConfig

CONFIG_PATH_ENV = "NEO_JINJA_CONFIG"
DEFAULT_CONFIG_FILE = "neo-jinja.yaml"

logger = get_logger("config")


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        NeoError: If required var not set
    """
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        raise create_error(
            "CONFIG_INVALID",
            detail=f"Required environment variable {var_name} not set",
        )

    return re.sub(pattern, replacer, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    else:
        return data


def _enum_values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


class ConfigLoader:
    """Load and validate neo-jinja configuration."""

    def __init__(self) -> None:
        self._config: NeoConfig | None = None
        self._config_path: Path | None = None

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> NeoConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. NEO_JINJA_CONFIG environment variable
        2. ./neo-jinja.yaml
        3. If use_defaults=True and no file found, default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded NeoConfig instance

        Raises:
            NeoError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = self._resolve_config_path()

        config_path = Path(path)

        if not config_path.exists():
            if use_defaults:
                logger.info("No config file found, using default configuration")
                return self.load_defaults()
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Configuration file not found: {config_path}",
            )

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Invalid YAML in config file: {e}",
            ) from e

        if not isinstance(data, dict):
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Configuration root must be a mapping: {config_path}",
            )

        data = _resolve_env_vars_recursive(data)
        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> NeoConfig:
        """Load default configuration without a file."""
        return self.load_from_dict({})

    def load_from_dict(self, data: dict[str, Any], config_path: Path | None = None) -> NeoConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded NeoConfig instance

        Raises:
            NeoError: If configuration is invalid
        """
        validation = self.validate(data)
        for issue in validation.warnings:
            logger.warning(issue.message, config_path=issue.path)
        if not validation.valid:
            error_messages = [f"- {issue.path}: {issue.message}" for issue in validation.errors]
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration validation failed:\n" + "\n".join(error_messages),
            )

        config = self._dict_to_config(data)
        self._config = config
        self._config_path = config_path

        logger.debug("Configuration loaded", source=str(config_path) if config_path else None)
        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for key in data:
            if key not in ("filters", "logging"):
                warnings.append(
                    ValidationIssue(
                        path=str(key),
                        message=f"Unknown configuration key: {key}",
                        severity="warning",
                    )
                )

        filters = data.get("filters", {})
        if not isinstance(filters, dict):
            errors.append(ValidationIssue(path="filters", message="filters must be a dictionary"))
        else:
            errors.extend(self._validate_filters(filters))

        logging_section = data.get("logging", {})
        if not isinstance(logging_section, dict):
            errors.append(ValidationIssue(path="logging", message="logging must be a dictionary"))
        else:
            level = logging_section.get("level", LogLevel.INFO.value)
            if str(level).upper() not in _enum_values(LogLevel):
                errors.append(
                    ValidationIssue(
                        path="logging.level",
                        message=f"level must be one of {', '.join(_enum_values(LogLevel))}",
                    )
                )
            log_format = logging_section.get("format", LogFormat.JSON.value)
            if str(log_format).lower() not in _enum_values(LogFormat):
                errors.append(
                    ValidationIssue(
                        path="logging.format",
                        message=f"format must be one of {', '.join(_enum_values(LogFormat))}",
                    )
                )

        return ValidationResult(valid=True, errors=errors, warnings=warnings)

    def _validate_filters(self, filters: dict[str, Any]) -> list[ValidationIssue]:
        errors: list[ValidationIssue] = []

        enabled = filters.get("enabled", list(FILTER_NAMES))
        if not isinstance(enabled, list):
            errors.append(ValidationIssue(path="filters.enabled", message="enabled must be a list"))
        else:
            for index, name in enumerate(enabled):
                if name not in FILTER_NAMES:
                    errors.append(
                        ValidationIssue(
                            path=f"filters.enabled[{index}]",
                            message=f"Unknown filter: {name}",
                        )
                    )

        if "fail_soft" in filters and not isinstance(filters["fail_soft"], bool):
            errors.append(
                ValidationIssue(path="filters.fail_soft", message="fail_soft must be a boolean")
            )

        attribute_key = filters.get("default_attribute_key", "attributes")
        if not isinstance(attribute_key, str) or not attribute_key.lstrip("#"):
            errors.append(
                ValidationIssue(
                    path="filters.default_attribute_key",
                    message="default_attribute_key must be a non-empty string",
                )
            )

        parent_keys = filters.get("parent_object_keys", ["#object"])
        if (
            not isinstance(parent_keys, list)
            or not parent_keys
            or not all(isinstance(key, str) and key for key in parent_keys)
        ):
            errors.append(
                ValidationIssue(
                    path="filters.parent_object_keys",
                    message="parent_object_keys must be a non-empty list of strings",
                )
            )

        return errors

    def get(self) -> NeoConfig:
        """Get current configuration.

        Raises:
            NeoError: If configuration not loaded
        """
        if self._config is None:
            raise create_error("CONFIG_INVALID", detail="Configuration not loaded")
        return self._config

    def _resolve_config_path(self) -> Path:
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path)
        return Path(DEFAULT_CONFIG_FILE)

    def _dict_to_config(self, data: dict[str, Any]) -> NeoConfig:
        filters = data.get("filters", {})
        logging_section = data.get("logging", {})

        filters_config = FiltersConfig()
        if "enabled" in filters:
            filters_config.enabled = list(filters["enabled"])
        if "fail_soft" in filters:
            filters_config.fail_soft = filters["fail_soft"]
        if "default_attribute_key" in filters:
            filters_config.default_attribute_key = filters["default_attribute_key"]
        if "parent_object_keys" in filters:
            filters_config.parent_object_keys = list(filters["parent_object_keys"])

        logging_config = LoggingConfig()
        if "level" in logging_section:
            logging_config.level = LogLevel(str(logging_section["level"]).upper())
        if "format" in logging_section:
            logging_config.format = LogFormat(str(logging_section["format"]).lower())

        return NeoConfig(filters=filters_config, logging=logging_config)


def load_config(path: str | Path | None = None) -> NeoConfig:
    """Load configuration with a throwaway loader.

    Args:
        path: Optional config file path

    Returns:
        NeoConfig instance
    """
    return ConfigLoader().load(path)
