"""Redis-backed key-value store, shared between processes."""

from typing import Optional

import redis

from translate_client.services.caching.key_value_store import KeyValueStore


class RedisKeyValueStore(KeyValueStore):
    """
    Stores values in Redis under a namespace prefix.

    Entries get an optional expiry so abandoned languages do not linger
    forever; freshness itself is still decided by the record's timestamp.
    """

    def __init__(
        self,
        client: redis.Redis,
        prefix: str = "translate:",
        expire_seconds: Optional[int] = None,
    ):
        self._client = client
        self._prefix = prefix
        self._expire_seconds = expire_seconds

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "RedisKeyValueStore":
        return cls(redis.Redis.from_url(url), **kwargs)

    def get(self, key: str) -> Optional[bytes]:
        value = self._client.get(self._prefix + key)
        if value is None:
            return None
        return value if isinstance(value, bytes) else str(value).encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        self._client.set(self._prefix + key, value, ex=self._expire_seconds)

    def delete(self, key: str) -> None:
        self._client.delete(self._prefix + key)
