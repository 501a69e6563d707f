"""Main module for strategist."""

import logging
import os
import sys

from strategist.cli import run
from strategist.config.paths import get_paths
from strategist.config.settings import settings


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.ensure_workspace_dirs()
    log_file = paths.debug_log

    # Env var wins over the saved setting
    level = os.environ.get("STRATEGIST_LOG_LEVEL", settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("Strategist starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the Strategist application."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
