# src/todo_app/core/repository.py

"""
Task list transforms.

Every function takes the current sequence and returns a NEW list; the input
is never mutated. Unknown ids are a no-op (an unchanged copy is returned).
Persistence and navigation side effects live in AppState, not here.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from .models import Filter, TodoItem

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

# Fields callers may change through update().
_MUTABLE_FIELDS = frozenset({"title", "detail"})


class IdFactory:
    """
    Millisecond-timestamp ids, strictly increasing within a process.

    If two tasks are created in the same millisecond (or the clock goes
    backwards) the next id is last + 1.
    """

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, ids: Iterable[int]) -> None:
        """Make sure future ids are above every id in `ids`."""
        self._last = max(self._last, max(ids, default=0))

    def __call__(self) -> int:
        now_ms = int(self._clock() * 1000)
        self._last = max(now_ms, self._last + 1)
        return self._last


def find(todos: Sequence[TodoItem], todo_id: int | None) -> TodoItem | None:
    if todo_id is None:
        return None
    for t in todos:
        if t.id == todo_id:
            return t
    return None


def add(
    todos: Sequence[TodoItem],
    title: str,
    detail: str,
    *,
    id_factory: Callable[[], int],
) -> tuple[list[TodoItem], TodoItem]:
    """Append a new, not completed task. Returns (new_list, created)."""
    item = TodoItem(id=id_factory(), title=title, detail=detail, completed=False)
    return [*todos, item], item


def update(todos: Sequence[TodoItem], todo_id: int, **fields: str) -> list[TodoItem]:
    """Shallow-merge title/detail into the matching task."""
    bad = set(fields) - _MUTABLE_FIELDS
    if bad:
        raise TypeError(f"update() got unsupported fields: {', '.join(sorted(bad))}")

    if find(todos, todo_id) is None:
        logger.debug("update: no task id=%s", todo_id)
        return list(todos)

    return [replace(t, **fields) if t.id == todo_id else t for t in todos]


def delete(todos: Sequence[TodoItem], todo_id: int) -> list[TodoItem]:
    out = [t for t in todos if t.id != todo_id]
    if len(out) == len(todos):
        logger.debug("delete: no task id=%s", todo_id)
    return out


def mark_completed(todos: Sequence[TodoItem], todo_id: int) -> list[TodoItem]:
    """Set completed=True. There is no way back to not completed."""
    return [
        replace(t, completed=True) if t.id == todo_id and not t.completed else t
        for t in todos
    ]


def filter_todos(todos: Sequence[TodoItem], flt: Filter) -> list[TodoItem]:
    if flt is Filter.COMPLETED:
        return [t for t in todos if t.completed]
    return list(todos)
