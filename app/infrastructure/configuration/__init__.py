"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    slack_token = settings.slack.SLACK_TOKEN
    default_locale = settings.i18n.DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
