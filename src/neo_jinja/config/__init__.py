"""neo-jinja configuration - Config loading and models."""

from .loader import ConfigLoader, load_config, resolve_env_vars
from .models import FiltersConfig, LoggingConfig, NeoConfig

__all__ = [
    # Config models
    "NeoConfig",
    "FiltersConfig",
    "LoggingConfig",
    # Loader
    "ConfigLoader",
    "load_config",
    "resolve_env_vars",
]
