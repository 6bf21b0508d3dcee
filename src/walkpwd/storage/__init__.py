"""Storage utilities for walkpwd."""

from walkpwd.storage.paths import (
    ensure_directory,
    get_config_path,
    get_marker_path,
    get_platform_data_dir,
    get_vault_path,
    get_walkpwd_home,
)

__all__ = [
    "ensure_directory",
    "get_config_path",
    "get_marker_path",
    "get_platform_data_dir",
    "get_vault_path",
    "get_walkpwd_home",
]
