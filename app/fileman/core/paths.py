"""XDG-compliant path management for fileman.

This module provides standardized paths following the XDG Base Directory
Specification for user configuration.

XDG defaults:
- Config: ~/.config/fileman/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fileman"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fileman/ (or XDG_CONFIG_HOME/fileman/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the shell configuration file path.

    Returns:
        Path to ~/.config/fileman/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/fileman/theme.toml.
    """
    return get_config_dir() / "theme.toml"
