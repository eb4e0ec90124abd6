"""Settings manager for the optional settings.conf INI file."""

import configparser
from pathlib import Path
from typing import Any, TypedDict

from desktop_entry_filter.config.paths import Paths
from desktop_entry_filter.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOGGING,
    DEFAULT_LOG_LEVEL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_ENABLED,
    KEY_LOG_LEVEL,
    SECTION_LOGGING,
    VALID_LOG_LEVELS,
)
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)


class Settings(TypedDict):
    """Resolved runtime settings."""

    log_level: str
    console_log_level: str
    file_enabled: bool
    log_file: Path


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')

    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class CommentAwareConfigParser(configparser.ConfigParser):
    """ConfigParser that strips inline comments when reading values."""

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        """Get a configuration value with inline comments stripped."""
        value = super().get(section, option, **kwargs)
        return _strip_inline_comment(value)


class SettingsManager:
    """Loads settings.conf, falling back to defaults."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Settings file path
                (defaults to Paths.settings_file())

        """
        self.settings_file = settings_file or Paths.settings_file()

    def get_default_settings(self) -> Settings:
        """Get default settings values."""
        return {
            "log_level": DEFAULT_LOG_LEVEL,
            "console_log_level": DEFAULT_CONSOLE_LOG_LEVEL,
            "file_enabled": DEFAULT_FILE_LOGGING,
            "log_file": Paths.log_file(),
        }

    def load_settings(self) -> Settings:
        """Load settings from settings.conf.

        A missing file yields defaults. An unreadable or malformed file is
        reported as a warning and also yields defaults.

        Returns:
            Resolved settings

        """
        settings = self.get_default_settings()
        if not self.settings_file.exists():
            logger.debug("No settings file at %s", self.settings_file)
            return settings

        config = CommentAwareConfigParser(interpolation=None)
        try:
            with self.settings_file.open(encoding="utf-8") as f:
                config.read_file(f)
        except (OSError, configparser.Error) as e:
            logger.warning(
                "Ignoring settings file %s: %s", self.settings_file, e
            )
            return settings

        defaults = config.defaults()
        if KEY_LOG_LEVEL in defaults:
            settings["log_level"] = self._level(
                config.get(configparser.DEFAULTSECT, KEY_LOG_LEVEL),
                DEFAULT_LOG_LEVEL,
            )
        if KEY_CONSOLE_LOG_LEVEL in defaults:
            settings["console_log_level"] = self._level(
                config.get(configparser.DEFAULTSECT, KEY_CONSOLE_LOG_LEVEL),
                DEFAULT_CONSOLE_LOG_LEVEL,
            )
        if config.has_option(SECTION_LOGGING, KEY_FILE_ENABLED):
            try:
                settings["file_enabled"] = config.getboolean(
                    SECTION_LOGGING, KEY_FILE_ENABLED
                )
            except ValueError:
                logger.warning(
                    "Invalid %s value in %s, using default",
                    KEY_FILE_ENABLED,
                    self.settings_file,
                )

        logger.debug("Loaded settings from %s", self.settings_file)
        return settings

    def _level(self, value: str, default: str) -> str:
        """Normalize a level name, falling back to default when invalid."""
        level = value.strip().upper()
        if level in VALID_LOG_LEVELS:
            return level
        logger.warning(
            "Invalid log level %r in %s, using %s",
            value,
            self.settings_file,
            default,
        )
        return default
