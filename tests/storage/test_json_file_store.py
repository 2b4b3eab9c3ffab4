from __future__ import annotations

import pytest

from src.attendify.attendify.core.exceptions import PersistenceError
from src.attendify.attendify.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore


def test_file_store_set_get_remove(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "data" / "attendify.json")

    assert store.get("k") is None
    store.set("k", [{"a": 1}])
    store.set("other", True)

    reopened = JsonFileKeyValueStore(tmp_path / "data" / "attendify.json")
    assert reopened.get("k") == [{"a": 1}]

    reopened.remove("k")
    assert reopened.get("k") is None
    assert reopened.get("other") is True


def test_file_store_treats_corrupt_file_as_empty(tmp_path):
    path = tmp_path / "attendify.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileKeyValueStore(path).get("k") is None


def test_file_store_treats_undecodable_bytes_as_empty(tmp_path):
    path = tmp_path / "attendify.json"
    path.write_bytes(b'{"attendance-data": "\xff\xfe"}')

    assert JsonFileKeyValueStore(path).get("attendance-data") is None


def test_file_store_write_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonFileKeyValueStore(blocker / "attendify.json")

    with pytest.raises(PersistenceError):
        store.set("k", [])


def test_memory_store_does_not_share_mutable_values():
    store = InMemoryKeyValueStore()
    value = [1, 2]
    store.set("k", value)
    value.append(3)

    assert store.get("k") == [1, 2]
