"""Contract tests shared by every KeyValueStorage backend."""

import pytest

from word_lookup.io import FileKeyValueStorage, InMemoryKeyValueStorage, SqliteKeyValueStorage


@pytest.fixture(params=["memory", "file", "sqlite"])
def storage(request, tmp_path):
    """Provide each backend in turn."""
    if request.param == "memory":
        yield InMemoryKeyValueStorage()
    elif request.param == "file":
        yield FileKeyValueStorage(tmp_path / "store.json")
    else:
        backend = SqliteKeyValueStorage(tmp_path / "store.db")
        backend.ensure_schema()
        yield backend
        backend.close()


class TestKeyValueStorageContract:
    def test_get_returns_none_for_missing_key(self, storage):
        assert storage.get("searchHistory_u1") is None

    def test_set_and_get(self, storage):
        storage.set("favorites_u1", '[{"word": "lucid"}]')
        assert storage.get("favorites_u1") == '[{"word": "lucid"}]'

    def test_set_overwrites(self, storage):
        storage.set("stats_u1", "old")
        storage.set("stats_u1", "new")
        assert storage.get("stats_u1") == "new"

    def test_set_many(self, storage):
        storage.set("a", "1")
        storage.set_many({"a": "2", "b": "3"})
        assert storage.get("a") == "2"
        assert storage.get("b") == "3"

    def test_delete(self, storage):
        storage.set("a", "1")
        storage.delete("a")
        storage.delete("never-set")
        assert storage.get("a") is None

    def test_keys(self, storage):
        storage.set_many({"x": "1", "y": "2"})
        assert sorted(storage.keys()) == ["x", "y"]
