# src/todo_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console UI in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s... (log file: %s)", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        # Every change is already persisted when it happens.
        logger.info("Bye. tasks=%d", len(state.todos))


if __name__ == "__main__":
    main()
