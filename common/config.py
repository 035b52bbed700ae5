"""Configuration management for Diamonds."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration settings for Diamonds."""

    # Directory name created under the per-user config root
    config_dir_name: str = "diamonds"

    # Data file holding every project, rewritten on each change
    data_file_name: str = "data.json"

    # Overrides the per-user config root when set
    config_dir_override: Optional[str] = None

    # Color theme for the terminal view ("dark" or "light")
    theme: str = "dark"

    # Logging
    log_level: str = "INFO"
    log_file_name: Optional[str] = "diamonds.log"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config, applying DIAMONDS_* environment overrides."""
        config = cls()
        level = os.environ.get("DIAMONDS_LOG_LEVEL")
        if level:
            config.log_level = level
        override = os.environ.get("DIAMONDS_CONFIG_DIR")
        if override:
            config.config_dir_override = override
        theme = os.environ.get("DIAMONDS_THEME")
        if theme:
            config.theme = theme
        return config


# Default configuration instance
default_config = Config()
