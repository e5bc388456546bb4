"""Localization feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Message catalog configuration.

    Environment Variables:
        DEFAULT_LOCALE: Locale used when none has been selected (default: en)
        LOCALES_DIR: Directory of `<namespace>.<locale>.yml` catalogs
            (default: the bundled app/locales directory)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    LOCALES_DIR: Optional[Path] = Field(default=None, alias="LOCALES_DIR")
