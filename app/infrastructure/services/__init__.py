"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    SlackinServiceDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_slack_client,
    get_slackin_service,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "SlackinServiceDep",
    "get_settings",
    "get_translator",
    "get_slack_client",
    "get_slackin_service",
]
