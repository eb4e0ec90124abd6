"""Logging utilities for desktop-entry-filter.

This package provides:
- Colored console output on stderr (stdout is reserved for rendered files)
- Optional file rotation using standard RotatingFileHandler
- Configuration-based log levels from settings.conf
- Hierarchical logger naming (e.g., desktop_entry_filter.core.loader)

Usage:
    >>> from desktop_entry_filter.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing %s", path)  # Use %-style formatting

Environment Variables:
    DESKTOP_ENTRY_FILTER_LOG_DIR: Override the log file directory.

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from desktop_entry_filter.logger.config import (
    update_logger_from_config as _update_config,
)
from desktop_entry_filter.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    stream_supports_color,
)
from desktop_entry_filter.logger.handlers import ConfigurationError
from desktop_entry_filter.logger.logger import (
    clear_logger_state,
    get_logger,
    set_console_level,
    setup_logging,
)
from desktop_entry_filter.logger.state import _state, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_logging",
    "stream_supports_color",
    "update_logger_from_config",
]


def update_logger_from_config(settings=None) -> None:
    """Apply settings file log levels to the active handlers.

    Args:
        settings: Already loaded settings; loaded from disk when omitted

    """
    _update_config(get_state(), settings)
