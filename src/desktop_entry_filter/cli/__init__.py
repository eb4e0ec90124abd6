"""Command-line interface for desktop-entry-filter."""

from desktop_entry_filter.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
