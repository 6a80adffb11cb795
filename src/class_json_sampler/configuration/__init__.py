"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_INDENT, CatalogSettings, Configuration, OutputSettings

__all__ = [
    "CatalogSettings",
    "Configuration",
    "OutputSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_INDENT",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
