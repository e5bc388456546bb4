"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import Optional

from slack_sdk import WebClient

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator, create_translator
from integrations.slack.client import SlackClientManager
from modules.slackin.service import SlackinService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Loads every locale found in the configured catalogs directory (the
    bundled app/locales by default).

    Returns:
        Translator: Cached translator with all catalogs loaded.
    """
    settings = get_settings()
    return create_translator(
        translations_dir=settings.i18n.LOCALES_DIR,
        default_locale=settings.i18n.DEFAULT_LOCALE,
    )


def get_slack_client() -> Optional[WebClient]:
    """
    Get the shared Slack WebClient, or None when no token is configured.

    Returns:
        Optional[WebClient]: Client built by SlackClientManager.
    """
    if not get_settings().slack.SLACK_TOKEN:
        return None
    return SlackClientManager.get_client()


def get_slackin_service() -> SlackinService:
    """
    Build the slackin service from the shared client, translator and settings.

    Returns:
        SlackinService: Service for the landing page, invites and badge.
    """
    settings = get_settings()
    return SlackinService(
        client=get_slack_client(),
        translator=get_translator(),
        team_name=settings.slack.SLACK_TEAM_NAME,
        invite_channels=settings.slack.SLACK_INVITE_CHANNELS,
    )
