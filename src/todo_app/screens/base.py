# src/todo_app/screens/base.py

"""
Screen building blocks.

A screen renders itself from AppState as plain text and handles one line of
user input at a time. Input is "<action> [argument]"; tasks are addressed by
their 1-based position in the list the screen currently shows, so an action
can only ever reach a task that is on screen.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import ClassVar

from ..core.models import Page, TodoItem
from ..core.state import AppState

ActionHandler = Callable[[AppState, str], str]

RULE = "-" * 40


@dataclass(slots=True)
class Draft:
    """Uncommitted form input."""

    title: str = ""
    detail: str = ""


class Screen:
    page: ClassVar[Page]
    title: ClassVar[str]

    def __init__(self) -> None:
        self._actions: dict[str, ActionHandler] = {}
        self._help: dict[str, str] = {}
        self.register_actions()

    # ---- actions ----

    def register_actions(self) -> None:
        """Subclasses call self.action(...) here."""

    def action(
        self,
        name: str,
        handler: ActionHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        self._actions[key] = handler
        self._help[key] = help_text
        for alias in aliases or []:
            self._actions[alias.lower()] = handler

    def help_lines(self) -> list[str]:
        lines = [f"Actions on the {self.page} screen ({self.title}):"]
        lines.extend(f"  {text}" for text in self._help.values())
        return lines

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Run the action named by the first word of `line`.
        Returns a reply ("" = nothing to report) or None if the action is unknown.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None
        handler = self._actions.get(parts[0].lower())
        if handler is None:
            return None
        arg = parts[1] if len(parts) > 1 else ""
        return handler(state, arg)

    # ---- lifecycle / rendering ----

    def enter(self, state: AppState) -> None:
        """Called when this screen becomes the active one."""

    def body(self, state: AppState) -> list[str]:
        raise NotImplementedError

    def render(self, state: AppState) -> str:
        lines = [RULE, f"  {self.title}", RULE]
        lines.extend(self.body(state))
        lines.append(RULE)
        lines.append("Actions: " + " | ".join(self._help))
        return "\n".join(lines)


def pick(todos: Sequence[TodoItem], arg: str) -> TodoItem | None:
    """Resolve a 1-based position typed by the user."""
    try:
        pos = int(arg.strip())
    except ValueError:
        return None
    if pos < 1 or pos > len(todos):
        return None
    return todos[pos - 1]


def todo_lines(todos: Sequence[TodoItem], *, actions_for: Callable[[TodoItem], str]) -> list[str]:
    out: list[str] = []
    for i, t in enumerate(todos, start=1):
        mark = "x" if t.completed else " "
        out.append(f"{i:>3}. [{mark}] {t.title}   ({actions_for(t)})")
        out.append(f"       {t.detail}")
    return out
