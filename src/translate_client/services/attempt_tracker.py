"""Attempt Tracker - Suppresses remote fetches for keys that failed recently."""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from translate_client.core import TranslationAttempt

logger = logging.getLogger(__name__)


class AttemptTracker:
    """
    Soft circuit breaker keyed by cache key.

    Keeps at most one TranslationAttempt per key. A new failure overwrites the
    previous one and any success removes it. The tracker never talks to the
    network; it only tells the orchestrator whether it should.
    """

    def __init__(
        self,
        retry_after_seconds: float,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.retry_after_seconds = retry_after_seconds
        self._clock = clock
        self._attempts: dict[str, TranslationAttempt] = {}
        self._lock = threading.Lock()

    def record_failure(self, key: str, error: BaseException | str) -> TranslationAttempt:
        attempt = TranslationAttempt(error=str(error), occurred_at=self._clock())
        with self._lock:
            self._attempts[key] = attempt
        logger.debug("Recorded failed fetch for %s: %s", key, attempt.error)
        return attempt

    def record_success(self, key: str) -> None:
        with self._lock:
            self._attempts.pop(key, None)

    def should_avoid_retry(self, key: str) -> bool:
        """True if key failed within the last retry_after_seconds."""
        with self._lock:
            attempt = self._attempts.get(key)
        if attempt is None:
            return False
        return attempt.avoid_fetching_again(self.retry_after_seconds, now=self._clock())

    def get(self, key: str) -> Optional[TranslationAttempt]:
        with self._lock:
            return self._attempts.get(key)
