"""TranslationAttempt entity - a failed remote fetch for one cache key."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class TranslationAttempt:
    """Records when the last fetch for a key failed and why."""

    error: str
    occurred_at: datetime = field(default_factory=datetime.now)

    def avoid_fetching_again(
        self, retry_after_seconds: float, now: Optional[datetime] = None
    ) -> bool:
        """True while the attempt is still inside the suppression window."""
        now = now or datetime.now()
        return now < self.occurred_at + timedelta(seconds=retry_after_seconds)
