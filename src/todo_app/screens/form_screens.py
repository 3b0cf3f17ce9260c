# src/todo_app/screens/form_screens.py

"""Add/Edit screens: two required text fields held as a local draft."""

from __future__ import annotations

from ..core.models import Page, clean_fields
from ..core.state import AppState
from .base import Draft, Screen

TITLE_PLACEHOLDER = "Enter to-do title"
DETAIL_PLACEHOLDER = "Enter to-do details"


class _FormScreen(Screen):
    submit_label: str

    def __init__(self) -> None:
        super().__init__()
        self.draft = Draft()

    def register_actions(self) -> None:
        self.action("title", self._set_title, "title TEXT: set the title", aliases=["t"])
        self.action("detail", self._set_detail, "detail TEXT: set the detail", aliases=["details"])
        self.action(
            self.submit_label,
            self._submit,
            f"{self.submit_label} (or save): submit the form",
            aliases=["save", "s"],
        )
        self.action("back", self._back, "back: return to the list without saving", aliases=["b"])

    def body(self, state: AppState) -> list[str]:
        return [
            f"  Title : {self.draft.title or '<' + TITLE_PLACEHOLDER + '>'}",
            f"  Detail: {self.draft.detail or '<' + DETAIL_PLACEHOLDER + '>'}",
        ]

    def _set_title(self, state: AppState, arg: str) -> str:
        self.draft.title = arg
        return ""

    def _set_detail(self, state: AppState, arg: str) -> str:
        self.draft.detail = arg
        return ""

    def _submit(self, state: AppState, arg: str) -> str:
        raise NotImplementedError

    def _back(self, state: AppState, arg: str) -> str:
        self.draft = Draft()
        state.router.goto_list()
        return ""


class AddScreen(_FormScreen):
    page = Page.ADD
    title = "Add Task"
    submit_label = "add"

    def enter(self, state: AppState) -> None:
        self.draft = Draft()

    def _submit(self, state: AppState, arg: str) -> str:
        cleaned = clean_fields(self.draft.title, self.draft.detail)
        if cleaned is None:
            # Form does not submit; no message.
            return ""
        title, detail = cleaned
        state.add_todo(title, detail)
        self.draft = Draft()
        return f"Added: {title}"


class EditScreen(_FormScreen):
    """
    Draft is filled from the selected task when the screen is entered and
    again whenever the selected id changes.
    """

    page = Page.EDIT
    title = "Edit Task"
    submit_label = "update"

    def __init__(self) -> None:
        super().__init__()
        self._loaded_for: int | None = None

    def register_actions(self) -> None:
        super().register_actions()
        self.action("cancel", self._back, "cancel: discard changes and return to the list")

    def _populate(self, state: AppState) -> None:
        todo = state.selected_todo()
        self.draft = Draft(todo.title, todo.detail) if todo else Draft()
        self._loaded_for = state.router.selected_id

    def _sync(self, state: AppState) -> None:
        if state.router.selected_id != self._loaded_for:
            self._populate(state)

    def enter(self, state: AppState) -> None:
        self._populate(state)

    def body(self, state: AppState) -> list[str]:
        self._sync(state)
        if state.selected_todo() is None:
            return ["  This task no longer exists."]
        return super().body(state)

    def handle(self, state: AppState, line: str) -> str | None:
        self._sync(state)
        return super().handle(state, line)

    def _submit(self, state: AppState, arg: str) -> str:
        todo = state.selected_todo()
        if todo is None:
            return "This task no longer exists. Use back."
        cleaned = clean_fields(self.draft.title, self.draft.detail)
        if cleaned is None:
            return ""
        title, detail = cleaned
        state.update_todo(todo.id, title=title, detail=detail)
        self.draft = Draft()
        self._loaded_for = None
        return f"Updated: {title}"

    def _back(self, state: AppState, arg: str) -> str:
        self._loaded_for = None
        return super()._back(state, arg)
