"""Remote Translation Client - contract for fetching translation payloads."""

from abc import ABC, abstractmethod

from translate_client.core import TranslationRecord


class RemoteTranslationClient(ABC):
    """
    Abstract client for the remote translation service.

    Implementations (e.g., HttpTranslationClient) handle the network call.
    """

    @abstractmethod
    def fetch_translation(self, platform: str, language: str) -> TranslationRecord:
        """
        Fetch the full translation set for a platform and language.

        Args:
            platform: Platform name, e.g. "backend" or "web".
            language: Language code, e.g. "en" or "da".

        Returns:
            A new TranslationRecord stamped with the fetch time.

        Raises:
            RemoteFetchFailed: if the service is unreachable or answers badly.
        """
        pass
