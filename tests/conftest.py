# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.core.repository import IdFactory
from todo_app.core.state import AppState
from todo_app.screens import ScreenSet
from todo_app.storage.kv_store import MemoryKeyValueStore
from todo_app.storage.todo_store import TodoStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path / "data",
        store_path=tmp_path / "data" / "storage.json",
        storage_key="todos-list",
        clear_screen=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def state(settings: SimpleNamespace, kv: MemoryKeyValueStore, clock: FakeClock) -> AppState:
    """AppState over an in-memory key/value store and a fake clock."""
    st = AppState(
        settings=settings,
        store=TodoStore(kv, settings.storage_key),
        id_factory=IdFactory(clock),
    )
    st.load()
    return st


@pytest.fixture()
def screens() -> ScreenSet:
    return ScreenSet()
