"""
walkpwd configuration.
"""

from walkpwd.config.loader import (
    ConfigurationError,
    clear_config_cache,
    get_config,
    load_config,
    load_yaml_file,
)
from walkpwd.config.schema import ClipboardConfig, Config, GeneratorConfig

__all__ = [
    "ClipboardConfig",
    "Config",
    "ConfigurationError",
    "GeneratorConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
    "load_yaml_file",
]
