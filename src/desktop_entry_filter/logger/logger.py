"""Main logger module providing public API functions.

- setup_logging(): Configure the package root logger once
- get_logger(): Get a logger in the package hierarchy
- set_console_level(): Change console verbosity at runtime
- clear_logger_state(): Clear global logger state for testing
"""

import logging
from pathlib import Path

from desktop_entry_filter.constants import LOGGER_ROOT_NAME
from desktop_entry_filter.logger.config import load_log_settings
from desktop_entry_filter.logger.handlers import setup_root_logger
from desktop_entry_filter.logger.state import get_state


def setup_logging(
    name: str = LOGGER_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root logger is initialized exactly once; child loggers such as
    "desktop_entry_filter.core.loader" are created by logging.getLogger
    and propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = LOGGER_ROOT_NAME) -> logging.Logger:
    """Get or create logger instance.

    Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing %s", path)

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance (singleton per name)

    """
    return setup_logging(name=name)


def set_console_level(level: str) -> None:
    """Set the console handler level, e.g. "DEBUG" for --verbose runs.

    Args:
        level: Level name understood by the logging module

    """
    state = get_state()
    if state.console_handler is not None:
        state.console_handler.setLevel(
            getattr(logging, level.upper(), logging.WARNING)
        )


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes and removes all handlers from the package root logger and
    resets state flags so the next get_logger() call starts from scratch.
    Logger objects themselves are kept; module-level loggers stay valid.

    Warning:
        Intended for tests only.

    """
    state = get_state()
    with state.lock:
        for handler in state.handlers:
            handler.close()
        state.console_handler = None
        state.file_handler = None
        state.root_initialized = False

        root_logger = logging.getLogger(LOGGER_ROOT_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
