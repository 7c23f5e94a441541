"""Shell configuration and settings.

This module provides the configuration model and I/O functions for the
interactive shell. Configuration is optional and stored in
~/.config/fileman/config.toml; a missing file yields the defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fileman.core.paths import get_config_path

logger = logging.getLogger(__name__)


class ShellConfig(BaseModel):
    """Configuration for the interactive shell.

    Attributes:
        list_marker: Prefix printed before each listing or search entry.
        confirm_destructive: Ask before deleting files and directories.
        show_menu: Print the numbered menu before each command prompt.
    """

    model_config = ConfigDict(extra="forbid")

    list_marker: Annotated[
        str,
        Field(min_length=1, description="Prefix for listed entries"),
    ] = "- "
    confirm_destructive: Annotated[
        bool,
        Field(description="Confirm before delete operations"),
    ] = True
    show_menu: Annotated[
        bool,
        Field(description="Print the menu before each prompt"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ShellConfig:
    """Load shell configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ShellConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ShellConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return ShellConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: ShellConfig, path: Path | None = None) -> Path:
    """Save shell configuration to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace().

    Args:
        config: The ShellConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
