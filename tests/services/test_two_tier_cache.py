"""Unit tests for TwoTierCache."""

from datetime import timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from translate_client.core import TranslationRecord
from translate_client.services import InMemoryKeyValueStore, TwoTierCache


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def cache(store, clock):
    return TwoTierCache(store, cache_in_minutes=60, clock=clock)


@pytest.fixture
def record(clock):
    return TranslationRecord(
        platform="web",
        language="da",
        payload={"data": {"general": {"hello": "Hej"}}},
        fetched_at=clock(),
    )


class TestPut:
    def test_put_fills_both_tiers(self, cache, record):
        cache.put(record)

        assert cache.get_from_memory("web_da") == record
        assert cache.get_from_persistent("web_da") == record

    def test_put_swallows_store_failure(self, clock, record):
        store = MagicMock()
        store.set.side_effect = ConnectionError("store down")
        cache = TwoTierCache(store, cache_in_minutes=60, clock=clock)

        cache.put(record)

        assert cache.get_from_memory("web_da") == record

    def test_remember_fills_memory_only(self, cache, store, record):
        cache.remember(record)
        assert cache.get_from_memory("web_da") == record
        assert store.get("web_da") is None


class TestExpiry:
    def test_forced_expiry_evicts_both_tiers(self, cache, store, record, clock):
        cache.put(record)
        clock.advance(minutes=61)

        assert cache.get_from_memory("web_da") is None
        assert cache.get_from_persistent("web_da") is None
        assert store.get("web_da") is None

    def test_outdated_memory_entry_is_evicted(self, cache, record, clock):
        cache.remember(record)
        clock.advance(minutes=61)
        assert cache.get_from_memory("web_da") is None

        clock.now = record.fetched_at
        assert cache.get_from_memory("web_da") is None

    def test_allow_stale_keeps_outdated_persistent_entry(self, cache, store, record, clock):
        cache.put(record)
        clock.advance(hours=5)

        assert cache.get_from_persistent("web_da", allow_stale=True) == record
        assert store.get("web_da") is not None

    def test_clear_memory(self, cache, record):
        cache.put(record)
        cache.clear_memory()
        assert cache.get_from_memory("web_da") is None
        assert cache.get_from_persistent("web_da") == record


class TestPersistentFailures:
    def test_missing_entry_is_miss(self, cache):
        assert cache.get_from_persistent("api_en") is None

    def test_malformed_entry_is_deleted(self, cache, store):
        store.set("api_en", b"{broken")
        assert cache.get_from_persistent("api_en") is None
        assert store.get("api_en") is None

    def test_store_read_error_is_miss(self, clock):
        store = MagicMock()
        store.get.side_effect = OSError("disk unavailable")
        cache = TwoTierCache(store, cache_in_minutes=60, clock=clock)

        assert cache.get_from_persistent("api_en") is None

    def test_delete_failure_is_swallowed(self, clock):
        store = MagicMock()
        store.get.return_value = b"{broken"
        store.delete.side_effect = OSError("read-only")
        cache = TwoTierCache(store, cache_in_minutes=60, clock=clock)

        assert cache.get_from_persistent("api_en") is None
        store.delete.assert_called_once_with("api_en")


class TestTimezoneAwareEntries:
    def test_aware_persistent_entry_is_served(self, cache, store, clock):
        fetched_at = (clock() - timedelta(minutes=5)).astimezone(timezone.utc)
        store.set(
            "web_da",
            (
                b'{"platform": "web", "language": "da", "payload": {"data": {}},'
                b' "fetched_at": "' + fetched_at.isoformat().encode() + b'"}'
            ),
        )

        restored = cache.get_from_persistent("web_da")

        assert restored is not None
        assert restored.fetched_at == clock() - timedelta(minutes=5)

    def test_aware_outdated_persistent_entry_is_deleted(self, cache, store, clock):
        fetched_at = (clock() - timedelta(minutes=90)).astimezone(timezone.utc)
        store.set(
            "web_da",
            (
                b'{"platform": "web", "language": "da", "payload": {},'
                b' "fetched_at": "' + fetched_at.isoformat().encode() + b'"}'
            ),
        )

        assert cache.get_from_persistent("web_da") is None
        assert store.get("web_da") is None

    def test_aware_record_in_memory_is_served(self, cache, clock):
        record = TranslationRecord(
            platform="web", language="da", payload={}, fetched_at=clock().astimezone(timezone.utc)
        )
        cache.put(record)

        assert cache.get_from_memory("web_da") == record
        assert cache.get_from_persistent("web_da") == record

    def test_unusable_timestamp_is_dropped(self, cache, store, record):
        cache.put(record)

        with patch.object(TranslationRecord, "is_outdated", side_effect=TypeError("bad time")):
            assert cache.get_from_persistent("web_da") is None

        assert store.get("web_da") is None


class TestKeyMismatch:
    def test_entry_for_another_key_is_a_miss(self, cache, store, record):
        store.set("web_da-dk", record.serialize())

        assert cache.get_from_persistent("web_da-dk") is None
        assert store.get("web_da-dk") == record.serialize()

    def test_put_stores_under_record_key(self, cache, store, record):
        cache.put(record)
        assert store.keys() == ["web_da"]
