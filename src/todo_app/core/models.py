# src/todo_app/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Page(StrEnum):
    """Screens the UI can show. Exactly one is active at a time."""

    LIST = "list"
    ADD = "add"
    EDIT = "edit"
    COMPLETED = "completed"


class Filter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class TodoItem:
    id: int
    title: str
    detail: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "detail": self.detail,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> TodoItem | None:
        """
        Build a record from stored JSON.

        Returns None when the entry has no usable id (bools are rejected,
        numeric strings are accepted). Text fields that are missing or not
        strings become "".
        """
        if not isinstance(raw, dict):
            return None

        rid = raw.get("id")
        if isinstance(rid, bool):
            return None
        if isinstance(rid, float) and rid.is_integer():
            rid = int(rid)
        elif isinstance(rid, str):
            try:
                rid = int(rid.strip())
            except ValueError:
                return None
        if not isinstance(rid, int):
            return None

        title = raw.get("title")
        detail = raw.get("detail")
        return cls(
            id=rid,
            title=title if isinstance(title, str) else "",
            detail=detail if isinstance(detail, str) else "",
            completed=raw.get("completed") is True,
        )


def clean_fields(title: str, detail: str) -> tuple[str, str] | None:
    """Trim both fields; None if either ends up empty."""
    t = (title or "").strip()
    d = (detail or "").strip()
    if not t or not d:
        return None
    return t, d
