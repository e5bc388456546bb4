"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from infrastructure.services.providers import (
    get_settings,
    get_slackin_service,
    get_translator,
)
from modules.slackin.service import SlackinService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translator dependency - shared catalogs, pass locale= per call
TranslatorDep = Annotated[Translator, Depends(get_translator)]

# Slackin service dependency
SlackinServiceDep = Annotated[SlackinService, Depends(get_slackin_service)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "SlackinServiceDep",
]
