"""summaryviz configuration module."""

from .loader import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    generate_example_config_yaml,
    load_config,
    save_config,
)
from .schema import ChartConfig, VisualiserConfig

__all__ = [
    # Config classes
    "VisualiserConfig",
    "ChartConfig",
    # Loader functions
    "load_config",
    "save_config",
    "generate_example_config_yaml",
    # Exceptions
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
