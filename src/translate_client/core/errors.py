"""Error hierarchy for translation retrieval."""

from typing import Optional


class TranslateError(Exception):
    """Base class for every error raised by the translate client."""


class ConfigurationMissing(TranslateError):
    """A required setting is missing or malformed."""

    def __init__(self, setting: str, reason: str = "is missing"):
        self.setting = setting
        super().__init__(f"Translate config error - {setting} {reason}.")


class CacheUnavailable(TranslateError):
    """The persistent cache could not be read, written or decoded."""


class RemoteFetchFailed(TranslateError):
    """The remote translation service did not return a usable payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ServiceSuppressed(TranslateError):
    """Remote fetching is backed off and no cached fallback exists."""
