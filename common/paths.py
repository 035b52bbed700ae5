"""Locate the per-user directory that holds the Diamonds data file."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from common.config import Config
from common.errors import ConfigPathError
from common.logging_setup import get_logger

logger = get_logger(__name__)


def user_config_root() -> Path:
    """Return the platform's per-user configuration root."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise ConfigPathError("%APPDATA% is not defined")
        return Path(appdata)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".config"


def app_config_dir(config: Config) -> Path:
    """
    Resolve and create the application's config directory.

    Args:
        config: Active configuration

    Returns:
        Path to an existing directory

    Raises:
        ConfigPathError: If the directory cannot be resolved or created
    """
    try:
        if config.config_dir_override:
            directory = Path(config.config_dir_override).expanduser()
        else:
            directory = user_config_root() / config.config_dir_name
    except RuntimeError as exc:
        # Path.home() fails when no home directory can be determined
        raise ConfigPathError(f"could not get user config dir: {exc}") from exc

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigPathError(f"could not create app config dir: {exc}") from exc

    logger.debug(f"Using config directory {directory}")
    return directory


def data_file_path(config: Config) -> Path:
    """Return the path of the project data file."""
    return app_config_dir(config) / config.data_file_name


def log_file_path(config: Config) -> Path | None:
    """Return the path of the log file, or None when file logging is off."""
    if not config.log_file_name:
        return None
    return app_config_dir(config) / config.log_file_name
