"""SQLite-backed key-value persistence."""

import sqlite3
from pathlib import Path
from typing import Optional

from word_lookup.io.key_value_storage import KeyValueStorage, StorageError


class SqliteKeyValueStorage(KeyValueStorage):
    """Owns the SQLite connection and the key_value_store table."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        try:
            self.connection = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create the table if it does not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS key_value_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        self.connection.commit()

    def get(self, key: str) -> Optional[str]:
        try:
            cur = self.connection.cursor()
            cur.execute("SELECT value FROM key_value_store WHERE key = ?", (key,))
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Error reading key '{key}': {e}") from e
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                INSERT INTO key_value_store (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error writing key '{key}': {e}") from e

    def set_many(self, entries: dict[str, str]) -> None:
        """Write all entries in a single transaction."""
        try:
            with self.connection:
                self.connection.executemany(
                    """
                    INSERT INTO key_value_store (key, value)
                    VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    list(entries.items()),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Error writing {len(entries)} keys: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self.connection.execute("DELETE FROM key_value_store WHERE key = ?", (key,))
            self.connection.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error deleting key '{key}': {e}") from e

    def keys(self) -> list[str]:
        try:
            cur = self.connection.cursor()
            cur.execute("SELECT key FROM key_value_store ORDER BY key ASC")
            rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Error listing keys: {e}") from e
        return [row["key"] for row in rows]

    def close(self) -> None:
        self.connection.close()
