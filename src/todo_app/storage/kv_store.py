# src/todo_app/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Key/value store kept in one JSON object on disk: {"key": "string value", ...}.

    - loaded lazily on first access
    - every set() rewrites the file atomically (tmp file + os.replace)
    - a missing or corrupted file behaves like an empty store; it is
      overwritten on the next set()
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if self._data is not None:
            return self._data

        data: dict[str, str] = {}
        if self._path.exists():
            try:
                raw = json.loads(self._path.read_text("utf-8"))
            except (OSError, ValueError, RecursionError):
                logger.warning("Store file %s is unreadable; starting empty.", self._path, exc_info=True)
                raw = {}

            if isinstance(raw, dict):
                data = {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)}
            else:
                logger.warning("Store file %s is not a JSON object; starting empty.", self._path)

        logger.debug("Store loaded path=%s keys=%d", self._path, len(data))
        self._data = data
        return data

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Task text is personal; keep the file private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("Store saved path=%s key=%s bytes=%d", self._path, key, len(value))


class MemoryKeyValueStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
