"""CLI argument parser for desktop-entry-filter.

Handles parsing of command-line arguments and provides a clean
interface for defining the command and its options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from desktop_entry_filter import __version__


class CLIParser:
    """Command-line argument parser for desktop-entry-filter."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_arguments(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="desktop-entry-filter",
            description=(
                "Reduce .desktop files to a fixed set of keys and strip "
                "document formats from their MimeType list"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Rewrite a launcher in place
  %(prog)s ~/.local/share/applications/editor.desktop

  # Show what would be written, without touching the files
  %(prog)s --dry-run a.desktop b.desktop

  # Machine-readable report of every file
  %(prog)s --dry-run --json *.desktop
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --verbose.

        Args:
            parser (argparse.ArgumentParser): The main parser to add
                options to.

        """
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
            help="Show version and exit",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show detailed logging",
        )

    def _add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add input files and processing options.

        Args:
            parser (argparse.ArgumentParser): The main parser to add
                arguments to.

        """
        parser.add_argument(
            "input_files",
            nargs="+",
            type=Path,
            metavar="FILE",
            help=".desktop files to process",
        )
        parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="Print the rewritten files instead of writing them",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON report of every processed file",
        )
