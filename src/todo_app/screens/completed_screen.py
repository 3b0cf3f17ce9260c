# src/todo_app/screens/completed_screen.py

from __future__ import annotations

from ..core.models import Page
from ..core.state import AppState
from .base import Screen, pick, todo_lines


class CompletedScreen(Screen):
    """Completed tasks. They are read-only here apart from deletion."""

    page = Page.COMPLETED
    title = "Completed Task"

    def register_actions(self) -> None:
        self.action("del", self._delete, "del N: delete completed task N", aliases=["delete", "rm", "d"])
        self.action("back", self._back, "back: return to the task list", aliases=["b", "all"])

    def body(self, state: AppState) -> list[str]:
        done = state.completed_todos()
        if not done:
            return ["  No completed tasks."]
        return todo_lines(done, actions_for=lambda _t: "del")

    def _delete(self, state: AppState, arg: str) -> str:
        t = pick(state.completed_todos(), arg)
        if t is None:
            return f"No task #{arg.strip()}." if arg.strip() else "Usage: del N"
        state.delete_todo(t.id)
        return f"Deleted: {t.title}"

    def _back(self, state: AppState, arg: str) -> str:
        state.router.goto_list()
        return ""
