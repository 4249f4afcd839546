"""neo-jinja - Render tree filters for Jinja2 templates.

Filters for the nested render trees a CMS rendering pipeline builds before
markup is produced: add classes at any depth, pull labels, values and raw
values out of field nodes, reach referenced entities, list children and
render single fields of an embedded entity.

Usage:
    from neo_jinja import create_environment

    env = create_environment()
    env.from_string("{{ content.field_tags | neo_label }}").render(content=build)
"""

from neo_jinja.config import ConfigLoader, NeoConfig, load_config
from neo_jinja.errors import NeoError
from neo_jinja.template import RenderFilters, create_environment, get_filter, register_filters

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "RenderFilters",
    "create_environment",
    "register_filters",
    "get_filter",
    "NeoConfig",
    "ConfigLoader",
    "load_config",
    "NeoError",
]
