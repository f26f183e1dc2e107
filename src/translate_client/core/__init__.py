"""Domain layer - Pure entities representing translation data."""

from .errors import (
    CacheUnavailable,
    ConfigurationMissing,
    RemoteFetchFailed,
    ServiceSuppressed,
    TranslateError,
)
from .platform import Platform, platform_name
from .translation_attempt import TranslationAttempt
from .translation_record import TranslationRecord, cache_key, fallback

__all__ = [
    "TranslationRecord",
    "TranslationAttempt",
    "Platform",
    "platform_name",
    "cache_key",
    "fallback",
    "TranslateError",
    "ConfigurationMissing",
    "CacheUnavailable",
    "RemoteFetchFailed",
    "ServiceSuppressed",
]
