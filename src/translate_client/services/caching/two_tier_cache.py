"""Two-tier translation cache: process memory backed by a persistent store."""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from translate_client.core import CacheUnavailable, TranslationRecord
from translate_client.services.caching.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class TwoTierCache:
    """
    Stores TranslationRecords by cache key in memory and in a KeyValueStore.

    Expiry is checked lazily on read. The persistent tier is best-effort:
    every store error is logged and treated as a miss, and a failed write
    never fails the caller.
    """

    def __init__(
        self,
        store: KeyValueStore,
        cache_in_minutes: float,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.cache_in_minutes = cache_in_minutes
        self._clock = clock
        self._memory: dict[str, TranslationRecord] = {}
        self._lock = threading.Lock()

    def get_from_memory(self, key: str) -> Optional[TranslationRecord]:
        """Return a fresh record from memory, evicting it if outdated."""
        with self._lock:
            record = self._memory.get(key)
            if record is None:
                return None
            if record.is_outdated(self.cache_in_minutes, now=self._clock()):
                del self._memory[key]
                return None
            return record

    def get_from_persistent(
        self, key: str, allow_stale: bool = False
    ) -> Optional[TranslationRecord]:
        """
        Load a record from the persistent store.

        Args:
            key: Cache key.
            allow_stale: Return an outdated record instead of deleting it.

        Returns:
            The record, or None on miss, store error, bad data or expiry.
        """
        try:
            raw = self.store.get(key)
            if raw is None:
                return None
            record = TranslationRecord.deserialize(raw)
        except CacheUnavailable as e:
            logger.warning("Dropping unreadable cache entry %s: %s", key, e)
            self._delete_persistent(key)
            return None
        except Exception as e:
            logger.warning("Persistent cache read failed for %s: %s", key, e)
            return None

        if record.cache_key != key:
            logger.warning("Persistent cache entry %s holds %s, ignoring it", key, record.cache_key)
            return None

        if allow_stale:
            return record

        try:
            outdated = record.is_outdated(self.cache_in_minutes, now=self._clock())
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("Dropping cache entry %s with unusable timestamp: %s", key, e)
            self._delete_persistent(key)
            return None

        if outdated:
            logger.debug("Persistent cache for %s is outdated, removing it", key)
            self._delete_persistent(key)
            return None

        return record

    def put(self, record: TranslationRecord) -> None:
        """Write the record to both tiers."""
        key = record.cache_key
        logger.debug("Caching translations on key %s", key)
        self.remember(record)
        try:
            self.store.set(key, record.serialize())
        except Exception as e:
            logger.warning("Persistent cache write failed for %s: %s", key, e)

    def remember(self, record: TranslationRecord) -> None:
        """Write the record to the memory tier only."""
        with self._lock:
            self._memory[record.cache_key] = record

    def clear_memory(self) -> None:
        with self._lock:
            self._memory.clear()

    def _delete_persistent(self, key: str) -> None:
        try:
            self.store.delete(key)
        except Exception as e:
            logger.warning("Persistent cache delete failed for %s: %s", key, e)
