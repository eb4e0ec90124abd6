"""Logging formatters for console output.

Console records go to stderr next to the ``❌`` failure lines, which is
often redirected or piped alongside dry-run output. Level names are only
colored when the stream is an interactive terminal and ``NO_COLOR`` is
not set.

- ColoredConsoleFormatter: Optionally colors the level name
- HybridConsoleFormatter: Bare message for INFO, structured for others
"""

import logging
import os
from typing import TextIO

from desktop_entry_filter.constants import ENV_NO_COLOR, LOG_COLORS


def stream_supports_color(stream: TextIO) -> bool:
    """Return whether ANSI colors should be written to stream."""
    if os.getenv(ENV_NO_COLOR):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ColoredConsoleFormatter(logging.Formatter):
    """Structured formatter that colors the level name when enabled.

    The record's levelname is swapped for the colored variant only while
    the parent formatter runs.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_COLORS.get(record.levelname)
        if not self.use_color or color is None:
            return super().format(record)

        plain_levelname = record.levelname
        record.levelname = f"{color}{plain_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain_levelname


class HybridConsoleFormatter(ColoredConsoleFormatter):
    """Console formatter with bare INFO lines and structured other levels.

    Example Output:
        INFO:     "Rewrote foo.desktop"
        WARNING:  "12:30:45 - desktop_entry_filter.config - WARNING - ..."
        DEBUG:    "12:30:45 - desktop_entry_filter.core - DEBUG - ..."

    """

    def format(self, record: logging.LogRecord) -> str:
        """Format INFO records as the message alone."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)
