# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
on-disk store can be swapped for an in-memory one in tests.
"""

from collections.abc import Sequence
from typing import Protocol

from .models import TodoItem


class KeyValueStore(Protocol):
    """String key/value storage with get/set semantics (localStorage-like)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TodoRepo(Protocol):
    """Load/save the whole task list."""

    def load(self) -> list[TodoItem]: ...
    def save(self, todos: Sequence[TodoItem]) -> None: ...
