# src/todo_app/screens/list_screen.py

from __future__ import annotations

from ..core.models import Filter, Page, TodoItem
from ..core.state import AppState
from .base import Screen, pick, todo_lines


def _row_actions(t: TodoItem) -> str:
    # Completed tasks only offer delete.
    return "del" if t.completed else "done, edit, del"


class ListScreen(Screen):
    """Main screen: All/Completed tabs plus the filtered task list."""

    page = Page.LIST
    title = "TODO APP"

    def register_actions(self) -> None:
        self.action("done", self._done, "done N: mark task N as completed", aliases=["complete", "c"])
        self.action("edit", self._edit, "edit N: edit task N", aliases=["e"])
        self.action("del", self._delete, "del N: delete task N", aliases=["delete", "rm", "d"])
        self.action("add", self._add, "add: create a new task", aliases=["new", "a", "+"])
        self.action("completed", self._completed, "completed: show completed tasks")
        self.action("all", self._all, "all: show all tasks")

    def body(self, state: AppState) -> list[str]:
        flt = state.router.filter
        tabs = "  ".join(
            f"[{label}]" if flt is f else f" {label} "
            for f, label in ((Filter.ALL, "All"), (Filter.COMPLETED, "Completed"))
        )
        lines = [tabs, ""]

        if not state.todos:
            lines.append("  No tasks yet.")
            return lines

        lines.extend(todo_lines(state.visible_todos(), actions_for=_row_actions))
        return lines

    # ---- actions ----

    def _done(self, state: AppState, arg: str) -> str:
        t = pick(state.visible_todos(), arg)
        if t is None:
            return f"No task #{arg.strip()}." if arg.strip() else "Usage: done N"
        if t.completed:
            return "Already completed."
        state.mark_completed(t.id)
        return f"Completed: {t.title}"

    def _edit(self, state: AppState, arg: str) -> str:
        t = pick(state.visible_todos(), arg)
        if t is None:
            return f"No task #{arg.strip()}." if arg.strip() else "Usage: edit N"
        if t.completed:
            return "Completed tasks cannot be edited."
        state.router.goto_edit(t)
        return ""

    def _delete(self, state: AppState, arg: str) -> str:
        t = pick(state.visible_todos(), arg)
        if t is None:
            return f"No task #{arg.strip()}." if arg.strip() else "Usage: del N"
        state.delete_todo(t.id)
        return f"Deleted: {t.title}"

    def _add(self, state: AppState, arg: str) -> str:
        state.router.goto_add()
        return ""

    def _completed(self, state: AppState, arg: str) -> str:
        state.router.goto_completed()
        return ""

    def _all(self, state: AppState, arg: str) -> str:
        state.router.goto_list()
        return ""
