"""Centralized constants module for desktop-entry-filter.

This module serves as the single source of truth for all shared constants
across the codebase. Constants are organized by logical categories and use
typing.Final annotations to ensure immutability.

Usage:
    from desktop_entry_filter.constants import ALLOWED_KEYS
"""

from typing import Final

# =============================================================================
# Desktop entry constants
# =============================================================================

# The only section a processed file may contain
DESKTOP_ENTRY_SECTION: Final[str] = "Desktop Entry"

# Attribute holding the ';'-terminated list of media types
MIME_TYPE_KEY: Final[str] = "MimeType"

# Separator/terminator used by list-valued attributes
MIME_TYPE_SEPARATOR: Final[str] = ";"

# Keys kept when rewriting a file, in output order
ALLOWED_KEYS: Final[tuple[str, ...]] = (
    "Version",
    "Type",
    "Name",
    "GenericName",
    "Comment",
    "TryExec",
    "Exec",
    "Icon",
    "Categories",
    "X-GNOME-UsesNotifications",
)

# Document formats an application must not claim to open
DENIED_MEDIA_TYPE_NAMES: Final[tuple[str, ...]] = (
    "text/html",
    "text/rtf",
    "application/vnd.ms-word.document.macroEnabled.12",
    "text/plain",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/x-markdown",
    "application/vnd.oasis.opendocument.text",
    "application/pdf",
    "application/xhtml+xml",
    "application/x-ruby",
)

# Encoding used for reading and writing desktop files
DESKTOP_FILE_ENCODING: Final[str] = "utf-8"

# Temporary file naming for atomic replacement
ATOMIC_WRITE_TMP_PREFIX: Final[str] = "."
ATOMIC_WRITE_TMP_SUFFIX: Final[str] = ".tmp"

# =============================================================================
# Configuration Constants
# =============================================================================

APP_NAME: Final[str] = "desktop-entry-filter"

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
LOG_FILE_NAME: Final[str] = "desktop-entry-filter.log"

# Environment overrides
ENV_CONFIG_DIR: Final[str] = "DESKTOP_ENTRY_FILTER_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "DESKTOP_ENTRY_FILTER_LOG_DIR"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
ENV_NO_COLOR: Final[str] = "NO_COLOR"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_FILE_LOGGING: Final[bool] = False

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_LOGGING: Final[str] = "logging"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_ENABLED: Final[str] = "file_enabled"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Exit status
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

# =============================================================================
# Logging Constants
# =============================================================================

LOGGER_ROOT_NAME: Final[str] = "desktop_entry_filter"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
