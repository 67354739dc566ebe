"""I/O layer - Key-value persistence backends."""

from .key_value_storage import InMemoryKeyValueStorage, KeyValueStorage, StorageError
from .file_key_value_storage import FileKeyValueStorage
from .sqlite_key_value_storage import SqliteKeyValueStorage
from . import storage_keys

__all__ = [
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "FileKeyValueStorage",
    "SqliteKeyValueStorage",
    "StorageError",
    "storage_keys",
]
