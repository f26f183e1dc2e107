"""Builds the configured persistent store."""

from pathlib import Path

from translate_client.core import ConfigurationMissing
from translate_client.services.caching.file_key_value_store import FileKeyValueStore
from translate_client.services.caching.in_memory_key_value_store import InMemoryKeyValueStore
from translate_client.services.caching.key_value_store import KeyValueStore
from translate_client.services.caching.redis_key_value_store import RedisKeyValueStore
from translate_client.services.caching.sqlite_key_value_store import SqliteKeyValueStore
from translate_client.services.settings_manager import TranslateConfig


def build_key_value_store(config: TranslateConfig) -> KeyValueStore:
    """Create the KeyValueStore selected by config.cache_backend."""
    backend = config.cache_backend
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return FileKeyValueStore(Path(config.cache_path))
    if backend == "sqlite":
        return SqliteKeyValueStore(Path(config.cache_path) / "translations.db")
    if backend == "redis":
        # Stale entries must outlive the TTL to serve as a backoff fallback.
        return RedisKeyValueStore.from_url(
            config.redis_url, expire_seconds=config.cache_in_minutes * 60 * 24 or None
        )
    raise ConfigurationMissing("TRANSLATE_CACHE_BACKEND", f"has unknown value {backend!r}")
