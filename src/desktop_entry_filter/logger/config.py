"""Configuration loading and updating for logging system.

This module provides functions to load logger bootstrap settings and to
apply the settings file at runtime. The settings module is imported late
to avoid a circular dependency between logger and config.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from desktop_entry_filter.constants import (
    APP_NAME,
    CONFIG_DIR_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
    LOGGER_ROOT_NAME,
)
from desktop_entry_filter.logger.handlers import (
    ConfigurationError,
    create_file_handler,
)

if TYPE_CHECKING:
    from desktop_entry_filter.config import Settings
    from desktop_entry_filter.logger.state import _LoggerState


def default_log_path() -> Path:
    """Return the log file path, honouring the log directory override.

    Environment Variable Override:
        DESKTOP_ENTRY_FILTER_LOG_DIR: Overrides the log directory. Used by
        the test suite to keep test logs out of the user's config dir.

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return Path.home() / CONFIG_DIR_NAME / APP_NAME / "logs" / LOG_FILE_NAME


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns hardcoded defaults to avoid circular imports during module init.
    Call update_logger_from_config() afterwards to apply the settings file.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_log_path()


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings | None" = None
) -> None:
    """Update handler levels and file logging from the settings file.

    Args:
        state: Logger state object (from logger.state module)
        settings: Already loaded settings; loaded from disk when omitted

    """
    if settings is None:
        # Import here to avoid circular dependency
        from desktop_entry_filter.config import (  # noqa: PLC0415
            SettingsManager,
        )

        settings = SettingsManager().load_settings()

    console_level = getattr(
        logging, settings["console_log_level"], logging.WARNING
    )
    file_level = getattr(logging, settings["log_level"], logging.INFO)

    if state.console_handler is not None:
        state.console_handler.setLevel(console_level)

    root_logger = logging.getLogger(LOGGER_ROOT_NAME)
    if settings["file_enabled"] and state.file_handler is None:
        try:
            state.file_handler = create_file_handler(
                settings["log_file"], settings["log_level"]
            )
        except ConfigurationError as e:
            root_logger.warning("%s", e)
        else:
            root_logger.addHandler(state.file_handler)
    elif state.file_handler is not None:
        state.file_handler.setLevel(file_level)
