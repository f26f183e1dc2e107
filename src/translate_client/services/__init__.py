"""Services layer - configuration, caching, backoff and remote access."""

from translate_client.services.settings_manager import SettingsManager, TranslateConfig
from translate_client.services.attempt_tracker import AttemptTracker

# Caching services
from translate_client.services.caching import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
    RedisKeyValueStore,
    SqliteKeyValueStore,
    TwoTierCache,
    build_key_value_store,
)

# Remote services
from translate_client.services.remote import HttpTranslationClient, RemoteTranslationClient

__all__ = [
    "SettingsManager",
    "TranslateConfig",
    "AttemptTracker",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "SqliteKeyValueStore",
    "RedisKeyValueStore",
    "TwoTierCache",
    "build_key_value_store",
    "RemoteTranslationClient",
    "HttpTranslationClient",
]
