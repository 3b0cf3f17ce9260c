# src/todo_app/screens/__init__.py

from __future__ import annotations

from typing import assert_never

from ..core.models import Page
from ..core.state import AppState
from .base import Screen
from .completed_screen import CompletedScreen
from .form_screens import AddScreen, EditScreen
from .list_screen import ListScreen

__all__ = ["Screen", "ScreenSet", "ListScreen", "CompletedScreen", "AddScreen", "EditScreen"]


class ScreenSet:
    """
    One instance of each screen; picks the active one from router.page.

    Screen instances are long-lived so form drafts survive between input
    lines. enter() is called whenever the active page changes.
    """

    def __init__(self) -> None:
        self.list = ListScreen()
        self.completed = CompletedScreen()
        self.add = AddScreen()
        self.edit = EditScreen()
        self._last_page: Page | None = None

    def current(self, state: AppState) -> Screen:
        page = state.router.page
        screen: Screen
        match page:
            case Page.LIST:
                screen = self.list
            case Page.COMPLETED:
                screen = self.completed
            case Page.ADD:
                screen = self.add
            case Page.EDIT:
                screen = self.edit
            case _:
                assert_never(page)

        if page is not self._last_page:
            self._last_page = page
            screen.enter(state)
        return screen

    def render(self, state: AppState) -> str:
        return self.current(state).render(state)

    def handle(self, state: AppState, line: str) -> str | None:
        return self.current(state).handle(state, line)
