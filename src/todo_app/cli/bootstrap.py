# src/todo_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key/value store and task store into AppState,
- loads the persisted task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.kv_store import JsonFileKeyValueStore
from ..storage.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load stored tasks.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = JsonFileKeyValueStore(settings.store_path)
    state = AppState(settings=settings, store=TodoStore(kv, settings.storage_key))
    state.load()
    logger.info("State ready store=%s tasks=%d", settings.store_path, len(state.todos))
    return state
