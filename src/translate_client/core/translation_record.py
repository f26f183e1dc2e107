"""TranslationRecord entity - one platform/language translation payload."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional, Union

from .errors import CacheUnavailable

logger = logging.getLogger(__name__)


def cache_key(platform: str, language: str) -> str:
    """Key shared by the memory tier, the persistent tier and the attempt tracker."""
    return platform.lower() + "_" + language.lower()


def fallback(section: str, key: str) -> str:
    """Visible placeholder returned when a translation cannot be resolved."""
    return section + "." + key


def as_local_time(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


@dataclass(frozen=True)
class TranslationRecord:
    """
    Immutable snapshot of a translation payload for a platform and language.

    The payload is the document returned by the translation service. Sections
    live under its top-level ``data`` key::

        {"data": {"general": {"hello": "Hi"}}}

    Attributes:
        platform: Platform the translations were fetched for.
        language: Language code of the translations.
        payload: Raw translation document.
        fetched_at: When the payload was fetched. Never changes.
    """

    platform: str
    language: str
    payload: dict[str, Any]
    fetched_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        # All timestamps are naive local time so they compare with the clocks.
        object.__setattr__(self, "fetched_at", as_local_time(self.fetched_at))

    @property
    def cache_key(self) -> str:
        return cache_key(self.platform, self.language)

    def is_outdated(self, cache_in_minutes: float, now: Optional[datetime] = None) -> bool:
        """
        Check whether the record has outlived its time-to-live.

        Args:
            cache_in_minutes: TTL in minutes.
            now: Reference time, defaults to the current time.

        Returns:
            True if fetched_at + TTL lies in the past.
        """
        now = as_local_time(now or datetime.now())
        expires_at = self.fetched_at + timedelta(minutes=cache_in_minutes)
        logger.debug(
            "Expiration of %s cache is %s, current time is %s",
            self.cache_key,
            expires_at.isoformat(),
            now.isoformat(),
        )
        return expires_at < now

    def extract(self, section: str, key: str) -> str:
        """Return data[section][key], or "section.key" when it is missing."""
        section_node = self.extract_section(section)
        value = section_node.get(key) if section_node is not None else None
        if not isinstance(value, str):
            logger.debug("No translation for %s.%s in %s", section, key, self.cache_key)
            return fallback(section, key)
        return value

    def extract_section(self, section: str) -> Optional[dict[str, Any]]:
        """Return the sub-document for a section, or None if absent."""
        data = self.payload.get("data")
        if not isinstance(data, dict):
            return None
        node = data.get(section)
        return node if isinstance(node, dict) else None

    def serialize(self) -> bytes:
        """Encode the record for the persistent cache."""
        return json.dumps(
            {
                "platform": self.platform,
                "language": self.language,
                "payload": self.payload,
                "fetched_at": self.fetched_at.isoformat(),
            },
            ensure_ascii=False,
        ).encode("utf-8")

    @classmethod
    def deserialize(cls, raw: Union[bytes, str]) -> "TranslationRecord":
        """
        Rebuild a record produced by serialize().

        Raises:
            CacheUnavailable: if the data is not a valid encoded record.
        """
        try:
            data = json.loads(raw)
            payload = data["payload"]
            if not isinstance(payload, dict):
                raise ValueError("payload is not an object")
            if not isinstance(data["platform"], str) or not isinstance(data["language"], str):
                raise ValueError("platform and language must be strings")
            return cls(
                platform=data["platform"],
                language=data["language"],
                payload=payload,
                fetched_at=datetime.fromisoformat(data["fetched_at"]),
            )
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            KeyError,
            TypeError,
            ValueError,
            OverflowError,
        ) as e:
            raise CacheUnavailable(f"Malformed cached translation: {e}") from e
