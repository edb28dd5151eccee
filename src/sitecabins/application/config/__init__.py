"""Layout file schema, loading and conversion to domain objects.

Example:
    >>> from pathlib import Path
    >>> from sitecabins.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("site.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sitecabins.application.config.adapter import (
    config_to_catalogue,
    config_to_catalogue_entry,
    config_to_working_set,
)
from sitecabins.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sitecabins.application.config.schema import (
    SUPPORTED_VERSIONS,
    CatalogueEntryConfig,
    DimensionsConfig,
    LayoutConfiguration,
    PlacedItemConfig,
)

__all__ = [
    "CatalogueEntryConfig",
    "ConfigError",
    "DimensionsConfig",
    "LayoutConfiguration",
    "PlacedItemConfig",
    "SUPPORTED_VERSIONS",
    "config_to_catalogue",
    "config_to_catalogue_entry",
    "config_to_working_set",
    "load_config",
    "load_config_from_dict",
]
