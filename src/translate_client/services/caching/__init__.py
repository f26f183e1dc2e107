"""Caching services - persistent store interface, implementations and the two-tier cache."""

from translate_client.services.caching.key_value_store import KeyValueStore
from translate_client.services.caching.in_memory_key_value_store import InMemoryKeyValueStore
from translate_client.services.caching.file_key_value_store import FileKeyValueStore
from translate_client.services.caching.sqlite_key_value_store import SqliteKeyValueStore
from translate_client.services.caching.redis_key_value_store import RedisKeyValueStore
from translate_client.services.caching.two_tier_cache import TwoTierCache
from translate_client.services.caching.factory import build_key_value_store

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "SqliteKeyValueStore",
    "RedisKeyValueStore",
    "TwoTierCache",
    "build_key_value_store",
]
