# src/todo_app/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from . import repository
from .models import Filter, TodoItem
from .ports import TodoRepo
from .repository import IdFactory
from .router import Router

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    The one state container of the app.

    Screens and commands receive it explicitly; nothing here is a module
    global. Every list change is written to `store` right after the
    in-memory update.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: Any
    store: TodoRepo

    todos: list[TodoItem] = field(default_factory=list)
    router: Router = field(default_factory=Router)
    id_factory: IdFactory = field(default_factory=IdFactory)

    # ---- persistence ----

    def load(self) -> None:
        """Replace the in-memory list with whatever the store holds."""
        self.todos = self.store.load()
        self.id_factory.observe(t.id for t in self.todos)

    def _commit(self, new_todos: list[TodoItem]) -> None:
        self.todos = new_todos
        try:
            self.store.save(self.todos)
        except OSError:
            # In-memory list stays authoritative; next successful save catches up.
            logger.exception("Failed to persist %d tasks.", len(self.todos))

    # ---- queries ----

    def visible_todos(self) -> list[TodoItem]:
        return repository.filter_todos(self.todos, self.router.filter)

    def completed_todos(self) -> list[TodoItem]:
        return repository.filter_todos(self.todos, Filter.COMPLETED)

    def selected_todo(self) -> TodoItem | None:
        """Resolve router.selected_id against the live list (None if gone)."""
        return repository.find(self.todos, self.router.selected_id)

    # ---- mutations ----

    def add_todo(self, title: str, detail: str) -> TodoItem:
        new_todos, item = repository.add(self.todos, title, detail, id_factory=self.id_factory)
        self._commit(new_todos)
        self.router.reset()
        logger.info("Task added id=%s", item.id)
        return item

    def update_todo(self, todo_id: int, **fields: str) -> None:
        self._commit(repository.update(self.todos, todo_id, **fields))
        self.router.reset()
        logger.info("Task updated id=%s fields=%s", todo_id, sorted(fields))

    def delete_todo(self, todo_id: int) -> None:
        self._commit(repository.delete(self.todos, todo_id))
        self.router.reset()
        logger.info("Task deleted id=%s", todo_id)

    def mark_completed(self, todo_id: int) -> None:
        new_todos = repository.mark_completed(self.todos, todo_id)
        if new_todos == self.todos:
            logger.debug("mark_completed: nothing to change id=%s", todo_id)
            return
        self._commit(new_todos)
        logger.info("Task completed id=%s", todo_id)
