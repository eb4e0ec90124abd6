"""Main CLI entry point for desktop-entry-filter.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from desktop_entry_filter.cli import CLIRunner
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status.

    Raises:
        SystemExit: Always, carrying the run's exit status.

    """
    logger.debug("CLI started")
    try:
        status = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
