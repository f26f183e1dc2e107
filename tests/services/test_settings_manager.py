"""Unit tests for SettingsManager."""

import os
from pathlib import Path

import pytest

from translate_client.core import ConfigurationMissing
from translate_client.services import SettingsManager, TranslateConfig


@pytest.fixture
def clean_env():
    """Remove TRANSLATE_* variables before the test and restore them afterwards."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("TRANSLATE_")}
    for name in saved:
        del os.environ[name]
    yield
    for name in [k for k in os.environ if k.startswith("TRANSLATE_")]:
        del os.environ[name]
    os.environ.update(saved)


@pytest.fixture
def env_dir(tmp_path: Path, clean_env):
    return tmp_path


def write_env(directory: Path, content: str) -> SettingsManager:
    (directory / ".env").write_text(content)
    return SettingsManager(project_root=directory)


class TestSettingsManagerDefaults:
    def test_defaults_without_env_file(self, env_dir):
        config = SettingsManager(project_root=env_dir).get_config()
        assert config == TranslateConfig()

    def test_default_values(self):
        config = TranslateConfig()
        assert config.default_platform == "backend"
        assert config.default_language == "en"
        assert config.cache_in_minutes == 60
        assert config.retry_after_seconds == 180
        assert config.cache_backend == "memory"
        assert config.log is False


class TestSettingsManagerFromEnv:
    def test_reads_values_from_env_file(self, env_dir):
        settings = write_env(
            env_dir,
            "TRANSLATE_BASE_URL=https://translations.example.com/api/v2/\n"
            "TRANSLATE_APPLICATION_ID=app-123\n"
            "TRANSLATE_REST_KEY=rest-456\n"
            "TRANSLATE_DEFAULT_PLATFORM=web\n"
            "TRANSLATE_DEFAULT_LANGUAGE=da\n"
            "TRANSLATE_CACHE_IN_MINUTES=15\n"
            "TRANSLATE_RETRY_AFTER_SECONDS=30\n"
            "TRANSLATE_CACHE_BACKEND=SQLite\n"
            "TRANSLATE_CACHE_PATH=/var/cache/translate\n"
            "TRANSLATE_TIMEOUT_SECONDS=2.5\n"
            "TRANSLATE_LOG=true\n",
        )
        config = settings.get_config()

        assert config.base_url == "https://translations.example.com/api/v2"
        assert config.application_id == "app-123"
        assert config.rest_key == "rest-456"
        assert config.default_platform == "web"
        assert config.default_language == "da"
        assert config.cache_in_minutes == 15
        assert config.retry_after_seconds == 30
        assert config.cache_backend == "sqlite"
        assert config.cache_path == "/var/cache/translate"
        assert config.timeout_seconds == 2.5
        assert config.log is True

    def test_blank_values_use_defaults(self, env_dir):
        config = write_env(env_dir, "TRANSLATE_DEFAULT_LANGUAGE=   \n").get_config()
        assert config.default_language == "en"

    def test_reload_env_overrides(self, env_dir):
        settings = write_env(env_dir, "TRANSLATE_DEFAULT_LANGUAGE=da\n")
        assert settings.get_config().default_language == "da"

        (env_dir / ".env").write_text("TRANSLATE_DEFAULT_LANGUAGE=sv\n")
        settings.reload_env()
        assert settings.get_config().default_language == "sv"


class TestSettingsManagerErrors:
    def test_non_integer_ttl_raises(self, env_dir):
        settings = write_env(env_dir, "TRANSLATE_CACHE_IN_MINUTES=soon\n")
        with pytest.raises(ConfigurationMissing, match="TRANSLATE_CACHE_IN_MINUTES"):
            settings.get_config()

    def test_negative_window_raises(self, env_dir):
        settings = write_env(env_dir, "TRANSLATE_RETRY_AFTER_SECONDS=-5\n")
        with pytest.raises(ConfigurationMissing, match="TRANSLATE_RETRY_AFTER_SECONDS"):
            settings.get_config()

    def test_unknown_backend_raises(self, env_dir):
        settings = write_env(env_dir, "TRANSLATE_CACHE_BACKEND=memcached\n")
        with pytest.raises(ConfigurationMissing, match="TRANSLATE_CACHE_BACKEND"):
            settings.get_config()

    def test_require_credentials(self):
        assert TranslateConfig(application_id="a", rest_key="b").require_credentials() == ("a", "b")

    def test_require_credentials_missing_application_id(self):
        with pytest.raises(ConfigurationMissing, match="TRANSLATE_APPLICATION_ID"):
            TranslateConfig(rest_key="b").require_credentials()

    def test_require_credentials_missing_rest_key(self):
        with pytest.raises(ConfigurationMissing, match="TRANSLATE_REST_KEY"):
            TranslateConfig(application_id="a").require_credentials()
