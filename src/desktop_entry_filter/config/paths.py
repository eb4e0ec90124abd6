"""Path utilities for desktop-entry-filter configuration.

Centralizes the lookup of the configuration directory so every caller
resolves the same location and honours the same overrides.
"""

import os
from pathlib import Path

from desktop_entry_filter.constants import (
    APP_NAME,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    ENV_CONFIG_DIR,
    ENV_XDG_CONFIG_HOME,
)
from desktop_entry_filter.logger.config import default_log_path


class Paths:
    """Application paths and directory structure."""

    @staticmethod
    def config_dir() -> Path:
        """Return the configuration directory.

        Resolution order: DESKTOP_ENTRY_FILTER_CONFIG_DIR, then
        $XDG_CONFIG_HOME/desktop-entry-filter, then
        ~/.config/desktop-entry-filter.
        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return Path(override).expanduser()
        xdg_config_home = os.getenv(ENV_XDG_CONFIG_HOME)
        if xdg_config_home:
            return Path(xdg_config_home).expanduser() / APP_NAME
        return Path.home() / CONFIG_DIR_NAME / APP_NAME

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of settings.conf."""
        return cls.config_dir() / CONFIG_FILE_NAME

    @staticmethod
    def log_file() -> Path:
        """Return the path of the rotating log file."""
        return default_log_path()
