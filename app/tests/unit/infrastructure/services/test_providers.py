"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() and get_translator() caching behavior
- Slack client and slackin service construction from settings
- Dependency override pattern for testing
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.integrations import SlackSettings
from infrastructure.i18n import Translator
from infrastructure.services.dependencies import SettingsDep, TranslatorDep
from infrastructure.services.providers import (
    get_settings,
    get_slack_client,
    get_slackin_service,
    get_translator,
)


@pytest.fixture(autouse=True)
def cleanup_provider_cache():
    """Clear provider caches around each test."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()


def _settings(**slack) -> Settings:
    return Settings(_env_file=None, slack=SlackSettings(_env_file=None, **slack))


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() returns a Settings instance."""
        result = get_settings()
        assert isinstance(result, Settings)

    def test_get_settings_returns_cached_instance(self):
        """get_settings() returns the same instance (caching)."""
        result1 = get_settings()
        result2 = get_settings()
        assert result1 is result2

    def test_get_settings_cache_can_be_cleared(self):
        """get_settings() cache can be cleared for testing."""
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


class TestGetTranslator:
    """Tests for get_translator() provider function."""

    def test_get_translator_loads_bundled_catalogs(self):
        translator = get_translator()
        assert isinstance(translator, Translator)
        assert set(translator.get_available_locales()) == {"en", "pt-br"}

    def test_get_translator_returns_cached_instance(self):
        assert get_translator() is get_translator()

    @patch("infrastructure.services.providers.get_settings")
    def test_get_translator_uses_settings(self, mock_get_settings, tmp_path):
        (tmp_path / "slackin.pt-br.yml").write_text(
            "slackin:\n  submit: Entrar\n", encoding="utf-8"
        )
        mock_get_settings.return_value = Settings(
            _env_file=None,
            i18n=I18nSettings(
                _env_file=None, DEFAULT_LOCALE="pt-br", LOCALES_DIR=tmp_path
            ),
        )

        translator = get_translator()

        assert translator.default_locale == "pt-br"
        assert translator.get("slackin.submit") == "Entrar"


class TestGetSlackClient:
    """Tests for get_slack_client() provider function."""

    @patch("infrastructure.services.providers.get_settings")
    def test_without_token(self, mock_get_settings):
        mock_get_settings.return_value = _settings()
        assert get_slack_client() is None

    @patch("infrastructure.services.providers.SlackClientManager")
    @patch("infrastructure.services.providers.get_settings")
    def test_with_token(self, mock_get_settings, mock_manager):
        mock_get_settings.return_value = _settings(SLACK_TOKEN="xoxp-token")
        assert get_slack_client() is mock_manager.get_client.return_value


class TestGetSlackinService:
    """Tests for get_slackin_service() provider function."""

    @patch("infrastructure.services.providers.get_slack_client")
    @patch("infrastructure.services.providers.get_settings")
    def test_service_built_from_settings(self, mock_get_settings, mock_get_client):
        mock_get_settings.return_value = _settings(
            SLACK_TEAM_NAME="Acme", SLACK_INVITE_CHANNELS="C001,C002"
        )

        service = get_slackin_service()

        assert service.client is mock_get_client.return_value
        assert service.translator is get_translator()
        assert service.team_name == "Acme"
        assert service.invite_channels == ["C001", "C002"]


class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        """SettingsDep can be overridden in FastAPI app."""
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"is_settings_instance": isinstance(settings, Settings)}

        app.dependency_overrides[get_settings] = lambda: MagicMock(spec=Settings)

        with TestClient(app) as client:
            response = client.get("/config")

        assert response.status_code == 200
        assert response.json()["is_settings_instance"] is True

        app.dependency_overrides.clear()

    def test_translator_dep_with_dependency_override(self):
        """TranslatorDep can be overridden in FastAPI app."""
        app = FastAPI()

        @app.get("/greeting")
        def greeting(translator: TranslatorDep) -> dict:
            return {"text": translator.get("ns.hello")}

        translator = Translator()
        translator.set_messages({"en.ns": {"hello": "Hello"}})
        app.dependency_overrides[get_translator] = lambda: translator

        with TestClient(app) as client:
            response = client.get("/greeting")

        assert response.json() == {"text": "Hello"}

        app.dependency_overrides.clear()
