"""Logger state management module.

This module provides the global logger state singleton used throughout
desktop-entry-filter. The singleton ensures the package root logger is
initialized exactly once.
"""

import logging
import threading


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        console_handler: Handler writing to stderr
        file_handler: Rotating file handler, if file logging is enabled

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.console_handler: logging.Handler | None = None
        self.file_handler: logging.Handler | None = None

    @property
    def handlers(self) -> list[logging.Handler]:
        """Return all active handlers."""
        return [
            handler
            for handler in (self.console_handler, self.file_handler)
            if handler is not None
        ]


# Global logger state singleton
_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
