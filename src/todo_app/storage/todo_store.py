# src/todo_app/storage/todo_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.models import TodoItem
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "todos-list"


def serialize_todos(todos: Sequence[TodoItem]) -> str:
    return json.dumps([t.to_dict() for t in todos], ensure_ascii=False)


def deserialize_todos(raw: str | None) -> list[TodoItem]:
    """
    Parse the stored list.

    Absent value, broken JSON or a non-list payload -> []. Entries that are
    not usable records are skipped, as are repeated ids (first one wins).
    """
    if raw is None or raw.strip() == "":
        return []

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Stored task list is not valid JSON; starting with an empty list.")
        return []

    if not isinstance(data, list):
        logger.warning("Stored task list is %s, expected a list; ignoring it.", type(data).__name__)
        return []

    out: list[TodoItem] = []
    seen: set[int] = set()
    for entry in data:
        item = TodoItem.from_dict(entry)
        if item is None or item.id in seen:
            logger.debug("Skipping stored entry: %r", entry)
            continue
        seen.add(item.id)
        out.append(item)
    return out


class TodoStore:
    """Reads/writes the whole task list under one key of a KeyValueStore."""

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[TodoItem]:
        todos = deserialize_todos(self._kv.get(self._key))
        logger.info("Loaded %d tasks from key=%s", len(todos), self._key)
        return todos

    def save(self, todos: Sequence[TodoItem]) -> None:
        self._kv.set(self._key, serialize_todos(todos))
        logger.debug("Saved %d tasks to key=%s", len(todos), self._key)
