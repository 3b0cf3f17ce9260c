# src/todo_app/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is created on disk at import time.
- Bad values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Storage ----
    data_dir: Path
    store_path: Path
    storage_key: str

    # ---- Console ----
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "storage.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        # Same key the browser build used in localStorage.
        storage_key = _env(_k("STORAGE_KEY"), "todos-list").strip() or "todos-list"

        clear_screen = _env_bool(_k("CLEAR_SCREEN"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            data_dir=data_dir,
            store_path=store_path,
            storage_key=storage_key,
            clear_screen=clear_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
