"""SQLite-backed key-value store for the persistent cache tier."""

import sqlite3
import threading
import time
from pathlib import Path
from typing import Optional

from translate_client.services.caching.key_value_store import KeyValueStore


class SqliteKeyValueStore(KeyValueStore):
    """Owns an SQLite connection and the translation_cache table."""

    def __init__(self, db_path: Path | str) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.connection = sqlite3.connect(self.db_path, check_same_thread=False)
        self.connection.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the cache table if it does not exist."""
        with self._lock:
            self.connection.execute(
                """
                CREATE TABLE IF NOT EXISTS translation_cache (
                    cache_key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at INTEGER NOT NULL
                );
                """
            )
            self.connection.commit()

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            cur = self.connection.cursor()
            cur.execute("SELECT value FROM translation_cache WHERE cache_key = ?", (key,))
            row = cur.fetchone()
        return bytes(row["value"]) if row else None

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self.connection.execute(
                """
                INSERT INTO translation_cache (cache_key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(cache_key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, sqlite3.Binary(value), int(time.time())),
            )
            self.connection.commit()

    def delete(self, key: str) -> None:
        with self._lock:
            self.connection.execute("DELETE FROM translation_cache WHERE cache_key = ?", (key,))
            self.connection.commit()

    def close(self) -> None:
        self.connection.close()
