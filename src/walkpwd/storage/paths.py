"""
Path utilities for walkpwd.

Resolves the per-user data directory that holds the vault, its
initialization marker and the optional configuration file.
"""

import os
import platform
from pathlib import Path

APP_NAME = "walkpwd"

VAULT_FILENAME = "vault.json"
MARKER_FILENAME = "vault_initialized.flag"
CONFIG_FILENAME = "config.yaml"


def get_platform_data_dir(system: str | None = None) -> Path:
    """
    Get the platform's per-user application data directory for walkpwd.

    Follows the usual conventions:
    - Linux and other Unix: $XDG_DATA_HOME/walkpwd or ~/.local/share/walkpwd
    - macOS: ~/Library/Application Support/walkpwd
    - Windows: %APPDATA%\\walkpwd\\data

    Args:
        system: Platform name as returned by platform.system(). Defaults to
            the running platform.

    Returns:
        Path to the data directory (not created).
    """
    if system is None:
        system = platform.system()

    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_NAME / "data"

    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data and Path(xdg_data).is_absolute():
        return Path(xdg_data) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_walkpwd_home() -> Path:
    """
    Get the walkpwd home directory (the vault directory).

    Resolution order:
    1. WALKPWD_HOME environment variable
    2. Platform per-user data directory

    Returns:
        Path to the walkpwd home directory.
    """
    env_home = os.environ.get("WALKPWD_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return get_platform_data_dir()


def get_vault_path(home: Path | None = None) -> Path:
    """
    Get the path to the vault record file.

    Returns:
        Path to <home>/vault.json
    """
    return (home or get_walkpwd_home()) / VAULT_FILENAME


def get_marker_path(home: Path | None = None) -> Path:
    """
    Get the path to the initialization marker.

    Returns:
        Path to <home>/vault_initialized.flag
    """
    return (home or get_walkpwd_home()) / MARKER_FILENAME


def get_config_path(home: Path | None = None) -> Path:
    """
    Get the path to the configuration file.

    Returns:
        Path to <home>/config.yaml
    """
    return (home or get_walkpwd_home()) / CONFIG_FILENAME


def ensure_directory(path: Path, mode: int = 0o700) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
