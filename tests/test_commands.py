# tests/test_commands.py

from __future__ import annotations

import logging

from todo_app.cli.commands import CommandRegistry, registry
from todo_app.core.models import Filter, Page
from todo_app.logging_setup import _ConsoleNoiseFilter


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert seen == [["x", "y"], []]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_navigation_commands(state) -> None:
    registry.handle(state, "/completed")
    assert (state.router.page, state.router.filter) == (Page.COMPLETED, Filter.COMPLETED)

    registry.handle(state, "/add")
    assert (state.router.page, state.router.filter) == (Page.ADD, Filter.ALL)

    registry.handle(state, "/list")
    assert (state.router.page, state.router.filter) == (Page.LIST, Filter.ALL)


def test_status_and_help(state) -> None:
    item = state.add_todo("a", "b")
    state.add_todo("c", "d")
    state.mark_completed(item.id)

    status = registry.handle(state, "/status") or ""
    assert "Tasks: 2 (1 completed, 1 open)" in status
    assert "todos-list" in status

    help_text = registry.handle(state, "/help") or ""
    assert "/status" in help_text
    assert "/exit" in help_text


def test_console_noise_filter() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("todo_app.core.state", logging.DEBUG))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))


def test_command_registry_passes_active_screen_to_three_param_handlers(state, screens) -> None:
    reg = CommandRegistry()
    seen: list[object] = []

    def handler(state, args, screen):
        seen.append(screen)
        return "ok"

    reg.register("s", handler, "s")
    active = screens.current(state)

    assert reg.handle(state, "/s", screen=active) == "ok"
    assert reg.handle(state, "/s") == "ok"
    assert seen == [active, None]


def test_help_lists_actions_of_current_screen(state, screens) -> None:
    help_text = registry.handle(state, "/help", screen=screens.current(state)) or ""
    assert "/status" in help_text
    assert "Actions on the list screen (TODO APP):" in help_text
    assert "done N: mark task N as completed" in help_text

    state.router.goto_completed()
    help_text = registry.handle(state, "/help", screen=screens.current(state)) or ""
    assert "del N: delete completed task N" in help_text
    assert "done N" not in help_text
