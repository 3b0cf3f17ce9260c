# src/todo_app/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..screens import ScreenSet

logger = logging.getLogger(__name__)

CLEAR = "\033[H\033[2J"


def _clear_screen(state: AppState) -> None:
    if not getattr(state.settings, "clear_screen", False):
        return
    if sys.stdout.isatty():
        print(CLEAR, end="", flush=True)


def run_console_loop(state: AppState, screens: ScreenSet | None = None) -> None:
    """Render the active screen, read one line, dispatch it. Repeat until /exit or EOF."""
    screens = screens or ScreenSet()
    logger.info("Console connector started (tasks=%d).", len(state.todos))
    print("Type an action shown under the screen. Use /help for commands, /exit to quit.\n")

    while True:
        _clear_screen(state)
        print(screens.render(state))

        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, screen=screens.current(state))
            if reply is None:
                reply = screens.handle(state, user_input)
                if reply is None:
                    reply = f"Unknown action: {user_input.split()[0]}. Use one of the actions listed below the screen."
        except Exception:
            logger.exception("Input handler crashed.")
            reply = "Internal error while handling input."

        if reply:
            print(reply)
        print()

    logger.info("Console connector finished.")
