# src/todo_app/core/router.py

"""
View router: which screen is shown, which task is being edited, which filter
is active.

State only changes through the named transitions below. They keep two rules:
- page == EDIT implies selected_id is set
- filter == COMPLETED exactly when page == COMPLETED
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .models import Filter, Page, TodoItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouterState:
    page: Page = Page.LIST
    # Weak reference: resolve against the live list, never cache the record.
    selected_id: int | None = None
    filter: Filter = Filter.ALL


INITIAL = RouterState()


def goto_list(_state: RouterState | None = None) -> RouterState:
    return RouterState(page=Page.LIST, selected_id=None, filter=Filter.ALL)


def goto_completed(_state: RouterState | None = None) -> RouterState:
    return RouterState(page=Page.COMPLETED, selected_id=None, filter=Filter.COMPLETED)


def goto_add(state: RouterState) -> RouterState:
    # The add screen is only offered from the list, where the filter is ALL.
    # Reset it anyway so COMPLETED never outlives the completed page.
    flt = Filter.ALL if state.filter is Filter.COMPLETED else state.filter
    return replace(state, page=Page.ADD, selected_id=None, filter=flt)


def goto_edit(state: RouterState, todo: TodoItem) -> RouterState:
    flt = Filter.ALL if state.filter is Filter.COMPLETED else state.filter
    return replace(state, page=Page.EDIT, selected_id=todo.id, filter=flt)


class Router:
    """Holds the current RouterState and applies transitions to it."""

    def __init__(self, state: RouterState = INITIAL) -> None:
        self._state = state

    @property
    def state(self) -> RouterState:
        return self._state

    @property
    def page(self) -> Page:
        return self._state.page

    @property
    def selected_id(self) -> int | None:
        return self._state.selected_id

    @property
    def filter(self) -> Filter:
        return self._state.filter

    def _move(self, new: RouterState) -> None:
        if new != self._state:
            logger.debug(
                "route %s -> %s (selected=%s filter=%s)",
                self._state.page,
                new.page,
                new.selected_id,
                new.filter,
            )
        self._state = new

    def goto_list(self) -> None:
        self._move(goto_list(self._state))

    def goto_completed(self) -> None:
        self._move(goto_completed(self._state))

    def goto_add(self) -> None:
        self._move(goto_add(self._state))

    def goto_edit(self, todo: TodoItem) -> None:
        self._move(goto_edit(self._state, todo))

    def reset(self) -> None:
        """Implicit reset after add/update/delete: back to the unfiltered list."""
        self.goto_list()
