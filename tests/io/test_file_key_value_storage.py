"""Unit tests for FileKeyValueStorage."""

import json
from datetime import datetime, timezone

import pytest

from word_lookup.io import FileKeyValueStorage, StorageError
from word_lookup.services import UserActivityStore


def test_file_format_is_versioned(tmp_path):
    path = tmp_path / "nested" / "store.json"
    storage = FileKeyValueStorage(path)
    storage.set("wordOfTheDay", '{"word": "lucid"}')

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == 1
    assert data["entries"] == {"wordOfTheDay": '{"word": "lucid"}'}


def test_values_survive_new_instance(tmp_path):
    path = tmp_path / "store.json"
    FileKeyValueStorage(path).set("stats_u1", "{}")
    assert FileKeyValueStorage(path).get("stats_u1") == "{}"


def test_corrupt_file_raises_storage_error(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(StorageError):
        FileKeyValueStorage(path).get("stats_u1")


def test_torn_file_is_replaced_on_next_write(tmp_path, caplog):
    path = tmp_path / "store.json"
    path.write_text('{"version": 1, "entr', encoding="utf-8")
    storage = FileKeyValueStorage(path)

    with caplog.at_level("ERROR"):
        storage.set_many({"searchHistory_u1": "[]", "stats_u1": "{}"})

    assert storage.get("searchHistory_u1") == "[]"
    assert json.loads(path.read_text(encoding="utf-8"))["version"] == 1
    assert "Discarding undecodable storage file" in caplog.text


def test_write_leaves_no_temporary_files(tmp_path):
    path = tmp_path / "store.json"
    storage = FileKeyValueStorage(path)
    storage.set("a", "1")
    storage.set("b", "2")
    storage.delete("a")

    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_activity_store_recovers_from_torn_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text('{"version": 1, "entr', encoding="utf-8")
    clock = lambda: datetime(2024, 3, 4, 12, tzinfo=timezone.utc)

    store = UserActivityStore(FileKeyValueStorage(path), clock=clock)
    store.initialize("u1")
    store.add_search("lucid")

    reloaded = UserActivityStore(FileKeyValueStorage(path), clock=clock)
    reloaded.initialize("u1")
    assert [item.word for item in reloaded.get_search_history()] == ["lucid"]
