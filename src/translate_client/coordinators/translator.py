"""Translator - Caller-facing translation lookups on top of the orchestrator."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from translate_client.core import (
    Platform,
    TranslateError,
    TranslationRecord,
    fallback,
    platform_name,
)
from translate_client.coordinators.fetch_orchestrator import FetchOrchestrator
from translate_client.services import (
    AttemptTracker,
    HttpTranslationClient,
    KeyValueStore,
    RemoteTranslationClient,
    TranslateConfig,
    TwoTierCache,
    build_key_value_store,
)

logger = logging.getLogger(__name__)

PlatformLike = Union[Platform, str]


@dataclass
class LookupResult:
    """Result of a translation lookup."""

    value: str
    error: Optional[TranslateError] = None

    @property
    def is_error(self) -> bool:
        """True if the lookup failed and value holds the fallback."""
        return self.error is not None


def replace_placeholders(value: str, replace: Optional[Mapping[str, str]]) -> str:
    """Substitute every {name} token found in replace; other tokens stay as-is."""
    for name, replacement in (replace or {}).items():
        value = value.replace("{" + name + "}", str(replacement))
    return value


class Translator:
    """
    Looks up localized strings by section and key.

    Platform and language default to the configured values. String lookups
    never raise: any failure degrades to the "section.key" fallback.
    """

    def __init__(
        self,
        orchestrator: FetchOrchestrator,
        default_platform: PlatformLike = Platform.BACKEND,
        default_language: str = "en",
    ):
        self.orchestrator = orchestrator
        self.default_platform = platform_name(default_platform)
        self.default_language = default_language

    @classmethod
    def from_settings(
        cls,
        config: TranslateConfig,
        client: Optional[RemoteTranslationClient] = None,
        store: Optional[KeyValueStore] = None,
    ) -> "Translator":
        """
        Wire the cache, attempt tracker and remote client from configuration.

        Raises:
            ConfigurationMissing: if no client is given and credentials are missing.
        """
        if client is None:
            client = HttpTranslationClient.from_config(config)
        if store is None:
            store = build_key_value_store(config)

        orchestrator = FetchOrchestrator(
            cache=TwoTierCache(store, cache_in_minutes=config.cache_in_minutes),
            attempts=AttemptTracker(retry_after_seconds=config.retry_after_seconds),
            client=client,
        )
        return cls(
            orchestrator,
            default_platform=config.default_platform,
            default_language=config.default_language,
        )

    def resolve(
        self, platform: Optional[PlatformLike] = None, language: Optional[str] = None
    ) -> TranslationRecord:
        """Resolve a translation set, applying the default platform and language."""
        return self.orchestrator.resolve(
            platform_name(platform or self.default_platform),
            language or self.default_language,
        )

    def lookup(
        self,
        section: str,
        key: str,
        *,
        platform: Optional[PlatformLike] = None,
        language: Optional[str] = None,
        replace: Optional[Mapping[str, str]] = None,
    ) -> LookupResult:
        """Look up one string, reporting failures in the result instead of raising."""
        platform = platform_name(platform or self.default_platform)
        language = language or self.default_language
        logger.debug(
            "Requesting translation for platform %s, language %s, section %s, key %s",
            platform,
            language,
            section,
            key,
        )
        try:
            record = self.orchestrator.resolve(platform, language)
        except TranslateError as e:
            logger.debug("Translation lookup for %s.%s failed: %s", section, key, e)
            return LookupResult(value=fallback(section, key), error=e)

        return LookupResult(value=replace_placeholders(record.extract(section, key), replace))

    def get(
        self,
        section: str,
        key: str,
        *,
        platform: Optional[PlatformLike] = None,
        language: Optional[str] = None,
        replace: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Return the localized string for section and key.

        Args:
            section: Section name in the translation set.
            key: Key within the section.
            platform: Platform, defaults to the configured platform.
            language: Language code, defaults to the configured language.
            replace: Values for {name} placeholders in the string.

        Returns:
            The translated string, or "section.key" if it cannot be resolved.
        """
        return self.lookup(
            section, key, platform=platform, language=language, replace=replace
        ).value

    def get_section(
        self,
        section: str,
        *,
        platform: Optional[PlatformLike] = None,
        language: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Return a whole section of the translation set.

        Raises:
            TranslateError: if the translation set cannot be resolved.
        """
        record = self.resolve(platform, language)
        return record.extract_section(section)
