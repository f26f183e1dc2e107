"""Remote services - client contract and HTTP implementation."""

from translate_client.services.remote.translation_client import RemoteTranslationClient
from translate_client.services.remote.http_translation_client import HttpTranslationClient

__all__ = [
    "RemoteTranslationClient",
    "HttpTranslationClient",
]
