"""Settings Manager - Handles translate client configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from translate_client.core import ConfigurationMissing

CACHE_BACKENDS = ("memory", "file", "sqlite", "redis")


@dataclass(frozen=True)
class TranslateConfig:
    """Values consumed by the cache/fetch pipeline and the HTTP client."""

    base_url: str = "https://nstack.io/api/v1"
    application_id: Optional[str] = None
    rest_key: Optional[str] = None
    default_platform: str = "backend"
    default_language: str = "en"
    cache_in_minutes: int = 60
    retry_after_seconds: int = 180
    cache_backend: str = "memory"
    cache_path: str = ".translate-cache"
    redis_url: str = "redis://localhost:6379/0"
    timeout_seconds: float = 10.0
    log: bool = False

    def require_credentials(self) -> tuple[str, str]:
        """
        Return (application_id, rest_key) for the remote service.

        Raises:
            ConfigurationMissing: if either credential is not set.
        """
        if not self.application_id:
            raise ConfigurationMissing("TRANSLATE_APPLICATION_ID")
        if not self.rest_key:
            raise ConfigurationMissing("TRANSLATE_REST_KEY")
        return self.application_id, self.rest_key


class SettingsManager:
    """
    Manages translate client settings.

    Reads a .env file from the project root into the environment, then builds
    a TranslateConfig from TRANSLATE_* variables.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_config(self) -> TranslateConfig:
        """
        Build the configuration from the environment.

        Raises:
            ConfigurationMissing: if a value is malformed.
        """
        defaults = TranslateConfig()
        cache_backend = self._get_str("TRANSLATE_CACHE_BACKEND", defaults.cache_backend).lower()
        if cache_backend not in CACHE_BACKENDS:
            raise ConfigurationMissing(
                "TRANSLATE_CACHE_BACKEND", f"must be one of {', '.join(CACHE_BACKENDS)}"
            )

        return TranslateConfig(
            base_url=self._get_str("TRANSLATE_BASE_URL", defaults.base_url).rstrip("/"),
            application_id=self._get_optional("TRANSLATE_APPLICATION_ID"),
            rest_key=self._get_optional("TRANSLATE_REST_KEY"),
            default_platform=self._get_str("TRANSLATE_DEFAULT_PLATFORM", defaults.default_platform),
            default_language=self._get_str("TRANSLATE_DEFAULT_LANGUAGE", defaults.default_language),
            cache_in_minutes=self._get_int("TRANSLATE_CACHE_IN_MINUTES", defaults.cache_in_minutes),
            retry_after_seconds=self._get_int(
                "TRANSLATE_RETRY_AFTER_SECONDS", defaults.retry_after_seconds
            ),
            cache_backend=cache_backend,
            cache_path=self._get_str("TRANSLATE_CACHE_PATH", defaults.cache_path),
            redis_url=self._get_str("TRANSLATE_REDIS_URL", defaults.redis_url),
            timeout_seconds=self._get_float("TRANSLATE_TIMEOUT_SECONDS", defaults.timeout_seconds),
            log=self._get_bool("TRANSLATE_LOG", defaults.log),
        )

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_optional(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_str(self, name: str, default: str) -> str:
        return self._get_optional(name) or default

    def _get_int(self, name: str, default: int) -> int:
        value = self._get_optional(name)
        if value is None:
            return default
        try:
            parsed = int(value)
        except ValueError:
            raise ConfigurationMissing(name, "must be an integer")
        if parsed < 0:
            raise ConfigurationMissing(name, "must not be negative")
        return parsed

    def _get_float(self, name: str, default: float) -> float:
        value = self._get_optional(name)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            raise ConfigurationMissing(name, "must be a number")

    def _get_bool(self, name: str, default: bool) -> bool:
        value = self._get_optional(name)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
