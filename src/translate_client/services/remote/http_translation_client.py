"""HTTP Translation Client - Fetches translation sets via the REST API."""

import logging
from datetime import datetime
from typing import Any, Callable, Optional

import httpx

from translate_client.core import RemoteFetchFailed, TranslationRecord
from translate_client.services.remote.translation_client import RemoteTranslationClient
from translate_client.services.settings_manager import TranslateConfig

logger = logging.getLogger(__name__)


class HttpTranslationClient(RemoteTranslationClient):
    """
    Translation client for the remote translation REST API.

    Calls ``GET {base_url}/translate/{platform}/keys`` with the language in
    the Accept-Language header and the application credentials in the
    X-Application-Id / X-Rest-Api-Key headers.
    """

    def __init__(
        self,
        base_url: str,
        application_id: str,
        rest_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.base_url = base_url.rstrip("/")
        self._application_id = application_id
        self._rest_key = rest_key
        self._client = client or httpx.Client(timeout=timeout)
        self._clock = clock

    @classmethod
    def from_config(cls, config: TranslateConfig, **kwargs) -> "HttpTranslationClient":
        """
        Build a client from configuration.

        Raises:
            ConfigurationMissing: if the credentials are not configured.
        """
        application_id, rest_key = config.require_credentials()
        return cls(
            base_url=config.base_url,
            application_id=application_id,
            rest_key=rest_key,
            timeout=config.timeout_seconds,
            **kwargs,
        )

    def _headers(self, language: str) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Accept-Language": language,
            "X-Application-Id": self._application_id,
            "X-Rest-Api-Key": self._rest_key,
        }

    def fetch_translation(self, platform: str, language: str) -> TranslationRecord:
        url = f"{self.base_url}/translate/{platform}/keys"
        logger.debug("Fetching translations from %s (language %s)", url, language)

        try:
            resp = self._client.get(url, headers=self._headers(language))
        except httpx.HTTPError as e:
            raise RemoteFetchFailed(f"Translation request failed: {e}") from e

        if resp.status_code >= 400:
            raise RemoteFetchFailed(
                f"Translation service returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        payload = self._parse_payload(resp)
        return TranslationRecord(
            platform=platform,
            language=language,
            payload=payload,
            fetched_at=self._clock(),
        )

    @staticmethod
    def _parse_payload(resp: httpx.Response) -> dict[str, Any]:
        try:
            payload = resp.json()
        except ValueError as e:
            raise RemoteFetchFailed(
                f"Non-JSON response: {resp.text[:200] if resp.text else '(empty)'}",
                status_code=resp.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise RemoteFetchFailed(
                "Translation response is not a JSON object", status_code=resp.status_code
            )
        return payload

    def close(self) -> None:
        self._client.close()
