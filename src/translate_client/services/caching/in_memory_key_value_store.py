"""In-memory key-value store for testing and single-process use."""

import threading
from typing import Optional

from translate_client.services.caching.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """
    Simple dict-backed store.

    Used for testing and when no shared cache is configured. No persistence.
    """

    def __init__(self):
        self._store: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._store[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def keys(self) -> list[str]:
        """List stored keys. Useful for diagnostics and testing."""
        with self._lock:
            return list(self._store.keys())
