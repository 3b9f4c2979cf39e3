"""Unit tests for key/value storage backends."""

from __future__ import annotations

import json
from pathlib import Path

from log_search_client.stores.storage import InMemoryStorage, JsonFileStorage


def test_in_memory_storage_get_set() -> None:
    storage = InMemoryStorage()

    assert storage.get("k") is None
    storage.set("k", "v")
    storage.set("k", "w")
    assert storage.get("k") == "w"


def test_json_file_storage_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "storage.json"
    storage = JsonFileStorage(path)

    assert storage.get("a") is None

    storage.set("a", "1")
    storage.set("b", '{"x": 2}')

    assert JsonFileStorage(path).get("a") == "1"
    assert JsonFileStorage(path).get("b") == '{"x": 2}'
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": '{"x": 2}'}


def test_json_file_storage_treats_corrupt_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{oops", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get("a") is None

    storage.set("a", "1")
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}


def test_json_file_storage_ignores_unexpected_shape(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text('["a", "b"]', encoding="utf-8")

    assert JsonFileStorage(path).get("a") is None


def test_json_file_storage_treats_undecodable_bytes_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_bytes(b'{"config-log-search-ui": "\xff\xfe"}')
    storage = JsonFileStorage(path)

    assert storage.get("config-log-search-ui") is None

    storage.set("a", "1")
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}
