"""Key-value store abstraction - plugin interface for the persistent cache tier."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract interface for the persistent translation cache.

    Implementations (FileKeyValueStore, SqliteKeyValueStore, RedisKeyValueStore)
    handle storage details. Any method may raise; callers treat the store as
    best-effort and fall back to a cache miss.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """
        Retrieve the raw value stored under key.

        Returns:
            The stored bytes, or None if the key is absent.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store or overwrite the value for key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key. Deleting a missing key is not an error."""
        pass
