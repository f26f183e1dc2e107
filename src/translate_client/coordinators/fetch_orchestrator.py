"""Fetch Orchestrator - Decides where a translation set is served from."""

import logging

from translate_client.core import (
    RemoteFetchFailed,
    ServiceSuppressed,
    TranslationRecord,
    cache_key,
)
from translate_client.services import AttemptTracker, RemoteTranslationClient, TwoTierCache

logger = logging.getLogger(__name__)


class FetchOrchestrator:
    """
    Resolves a (platform, language) pair to a TranslationRecord.

    Precedence, first hit wins:
        1. backoff: a recent failure skips the remote and serves the
           persistent entry even when stale, or raises ServiceSuppressed
        2. fresh memory entry
        3. fresh persistent entry (copied into memory)
        4. remote fetch, cached in both tiers on success
    """

    def __init__(
        self,
        cache: TwoTierCache,
        attempts: AttemptTracker,
        client: RemoteTranslationClient,
    ):
        self.cache = cache
        self.attempts = attempts
        self.client = client

    def resolve(self, platform: str, language: str) -> TranslationRecord:
        """
        Return the translation set for platform and language.

        Raises:
            ServiceSuppressed: backoff is active and nothing is cached.
            RemoteFetchFailed: the remote fetch failed.
        """
        key = cache_key(platform, language)

        # Memory is not consulted while backing off.
        if self.attempts.should_avoid_retry(key):
            logger.debug("Fetch for %s failed lately, not trying again yet", key)
            record = self.cache.get_from_persistent(key, allow_stale=True)
            if record is not None:
                logger.debug("Persistent cache used as fallback for %s", key)
                return record
            logger.debug("Fetch for %s failed lately and nothing is cached", key)
            raise ServiceSuppressed(f"Fetching {key} failed lately and no cache to read from")

        record = self.cache.get_from_memory(key)
        if record is not None:
            logger.debug("Memory cache used for %s", key)
            return record

        record = self.cache.get_from_persistent(key)
        if record is not None:
            logger.debug("Persistent cache used for %s", key)
            self.cache.remember(record)
            return record

        return self._fetch_remote(key, platform, language)

    def _fetch_remote(self, key: str, platform: str, language: str) -> TranslationRecord:
        logger.debug("Fetching %s from remote", key)
        try:
            record = self.client.fetch_translation(platform, language)
        except RemoteFetchFailed as e:
            self.attempts.record_failure(key, e)
            raise
        except Exception as e:
            self.attempts.record_failure(key, e)
            raise RemoteFetchFailed(f"Fetching {key} failed: {e}") from e

        logger.debug("Fetched %s from remote", key)
        self.cache.put(record)
        self.attempts.record_success(key)
        return record
