"""Main CLI entry point for gh-fetch.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from gh_fetch.cli import CLIRunner
from gh_fetch.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status code.

    Raises:
        SystemExit: Always, with 0 on success and non-zero on failure.

    """
    logger.debug("CLI started")
    try:
        code = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(130)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
