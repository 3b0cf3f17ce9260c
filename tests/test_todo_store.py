# tests/test_todo_store.py

from __future__ import annotations

import json
from pathlib import Path

from todo_app.core.models import TodoItem
from todo_app.storage.kv_store import JsonFileKeyValueStore, MemoryKeyValueStore
from todo_app.storage.todo_store import TodoStore, deserialize_todos, serialize_todos


def test_round_trip_preserves_records() -> None:
    todos = [
        TodoItem(id=1, title="Buy milk", detail="2%", completed=False),
        TodoItem(id=2, title="Молоко", detail="ünïcödé", completed=True),
    ]
    assert deserialize_todos(serialize_todos(todos)) == todos


def test_absent_or_blank_value_is_empty() -> None:
    assert deserialize_todos(None) == []
    assert deserialize_todos("   ") == []


def test_corrupted_value_falls_back_to_empty() -> None:
    assert deserialize_todos("[{not json") == []
    assert deserialize_todos('{"id": 1}') == []
    assert deserialize_todos('"hello"') == []


def test_invalid_entries_are_skipped() -> None:
    raw = json.dumps(
        [
            {"id": 1, "title": "ok", "detail": "d", "completed": False},
            {"title": "no id"},
            {"id": True, "title": "bool id"},
            "junk",
            {"id": 1, "title": "duplicate", "detail": "d"},
            {"id": "3", "title": "string id", "detail": "d", "completed": "yes"},
        ]
    )
    out = deserialize_todos(raw)
    assert [t.id for t in out] == [1, 3]
    assert out[1].completed is False


def test_store_uses_fixed_key() -> None:
    kv = MemoryKeyValueStore()
    store = TodoStore(kv)
    store.save([TodoItem(id=5, title="t", detail="d")])
    assert list(kv.data) == ["todos-list"]
    assert json.loads(kv.data["todos-list"]) == [
        {"id": 5, "title": "t", "detail": "d", "completed": False}
    ]
    assert store.load() == [TodoItem(id=5, title="t", detail="d")]


def test_store_load_with_corrupted_value_returns_empty() -> None:
    kv = MemoryKeyValueStore({"todos-list": "}{"})
    assert TodoStore(kv).load() == []


def test_json_file_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "storage.json"
    a = JsonFileKeyValueStore(path)
    assert a.get("k") is None
    a.set("k", "v1")
    a.set("other", "v2")

    b = JsonFileKeyValueStore(path)
    assert b.get("k") == "v1"
    assert b.get("other") == "v2"
    assert not path.with_suffix(".json.tmp").exists()


def test_json_file_store_treats_corrupted_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("not json at all", "utf-8")

    kv = JsonFileKeyValueStore(path)
    assert kv.get("todos-list") is None

    kv.set("todos-list", "[]")
    assert json.loads(path.read_text("utf-8")) == {"todos-list": "[]"}


def test_json_file_store_ignores_non_string_values(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"a": "ok", "b": 3, "c": None}), "utf-8")
    kv = JsonFileKeyValueStore(path)
    assert kv.get("a") == "ok"
    assert kv.get("b") is None


def test_deeply_nested_value_falls_back_to_empty() -> None:
    kv = MemoryKeyValueStore({"todos-list": "[" * 100000})
    assert TodoStore(kv).load() == []


def test_json_file_store_treats_deeply_nested_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("[" * 100000, "utf-8")

    kv = JsonFileKeyValueStore(path)
    assert kv.get("todos-list") is None
    assert TodoStore(kv).load() == []
