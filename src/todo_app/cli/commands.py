# src/todo_app/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..screens.base import Screen

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Screen | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry available on every screen (/help, /status, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, screen: Screen | None = None) -> str | None:
        """
        Handle a string like "/command args".
        `screen` is the active screen, passed to handlers that take a third parameter.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("command /%s args=%s", name, args)

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, screen)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str], screen: Screen | None = None) -> str:
    text = registry.build_help()
    if screen is None:
        return text + "\nScreen actions are listed under each screen."
    return text + "\n" + "\n".join(screen.help_lines())


def cmd_status(state: AppState, args: list[str]) -> str:
    total = len(state.todos)
    done = len(state.completed_todos())
    settings = state.settings
    store_path = getattr(settings, "store_path", "?")
    key = getattr(settings, "storage_key", "?")
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} completed, {total - done} open)\n"
        f"  Screen: {state.router.page} (filter: {state.router.filter})\n"
        f"  Store: {store_path} [key: {key}]"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    state.router.goto_list()
    return ""


def cmd_completed(state: AppState, args: list[str]) -> str:
    state.router.goto_completed()
    return ""


def cmd_add(state: AppState, args: list[str]) -> str:
    state.router.goto_add()
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, current screen and store.")
registry.register("list", cmd_list, help_text="Go to the task list (all tasks).", aliases=["all", "home"])
registry.register("completed", cmd_completed, help_text="Go to the completed tasks.", aliases=["done"])
registry.register("add", cmd_add, help_text="Open the add task form.", aliases=["new"])
