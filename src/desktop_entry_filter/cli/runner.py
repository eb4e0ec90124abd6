"""CLI runner for desktop-entry-filter.

Orchestrates a run: parses arguments, applies settings, processes every
input file and reports the outcome on the standard streams.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from desktop_entry_filter.cli.parser import CLIParser
from desktop_entry_filter.cli.report import format_dry_run, format_json_report
from desktop_entry_filter.config import SettingsManager
from desktop_entry_filter.constants import EXIT_FAILURE, EXIT_SUCCESS
from desktop_entry_filter.core.processor import (
    DesktopFileProcessor,
    FileResult,
)
from desktop_entry_filter.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self, settings_manager: SettingsManager | None = None
    ) -> None:
        """Initialize CLI runner and apply logging settings.

        Args:
            settings_manager: Settings source (defaults to settings.conf)

        """
        self.settings_manager = settings_manager or SettingsManager()
        self.settings = self.settings_manager.load_settings()
        update_logger_from_config(self.settings)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Process exit status: 0 if every file succeeded, 1 otherwise

        """
        args = CLIParser().parse_args(argv)

        if args.verbose:
            set_console_level("DEBUG")

        results = self._process(args)
        self._report(args, results)

        failed = [result for result in results if not result.ok]
        if failed:
            logger.debug(
                "%d of %d file(s) failed", len(failed), len(results)
            )
            return EXIT_FAILURE
        return EXIT_SUCCESS

    def _process(self, args: Namespace) -> list[FileResult]:
        """Process all input files."""
        processor = DesktopFileProcessor(dry_run=args.dry_run)
        return processor.process_all(args.input_files)

    def _report(self, args: Namespace, results: list[FileResult]) -> None:
        """Print output and per-file errors."""
        for result in results:
            if result.error is not None:
                logger.info(
                    "%s failed with %s", result.path, result.error.kind
                )
                print(f"❌ {result.error}", file=sys.stderr)

        if args.json:
            print(format_json_report(results, args.dry_run))
        elif args.dry_run:
            output = format_dry_run(results)
            if output:
                print(output)
