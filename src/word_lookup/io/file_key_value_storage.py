"""File-based key-value storage kept in a single JSON document."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from word_lookup.io.key_value_storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)


class FileKeyValueStorage(KeyValueStorage):
    """
    Stores every key in one JSON file.

    Format:
    {
        "version": 1,
        "entries": {
            "searchHistory_<user>": "<serialized blob>",
            "wordOfTheDay": "<serialized blob>"
        }
    }

    The whole document is written to a temporary file beside the target and
    swapped in with ``os.replace``, so readers see either the old or the new
    document. An undecodable document is replaced on the next write.
    """

    STORAGE_VERSION = 1

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    def get(self, key: str) -> Optional[str]:
        return self._read_entries().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, entries: dict[str, str]) -> None:
        current = self._read_entries_for_write()
        current.update(entries)
        self._write_entries(current)

    def delete(self, key: str) -> None:
        entries = self._read_entries_for_write()
        if entries.pop(key, None) is not None:
            self._write_entries(entries)

    def keys(self) -> list[str]:
        return list(self._read_entries().keys())

    def _read_entries(self) -> dict[str, str]:
        if not self.file_path.exists():
            return {}
        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            raise StorageError(f"Error reading storage file {self.file_path}: {e}") from e
        entries = data.get("entries", {}) if isinstance(data, dict) else {}
        return dict(entries)

    def _read_entries_for_write(self) -> dict[str, str]:
        try:
            return self._read_entries()
        except StorageError as e:
            if isinstance(e.__cause__, json.JSONDecodeError):
                logger.error("Discarding undecodable storage file: %s", e)
                return {}
            raise

    def _write_entries(self, entries: dict[str, str]) -> None:
        data = {"version": self.STORAGE_VERSION, "entries": entries}
        tmp_name = None
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(data, indent=2, ensure_ascii=False))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.file_path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Error writing storage file {self.file_path}: {e}") from e
