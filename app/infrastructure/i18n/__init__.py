"""i18n system - message catalogs, pluralization and placeholder substitution.

Main components:
- models: MessageKey, MessageCatalog
- rules: explicit pluralization rules (ExactSet, Interval) and their parser
- loader: TranslationLoader, YAMLTranslationLoader, JSONTranslationLoader
- translator: Translator with get(), choice() and has()
- factory: create_translator() for the bundled catalogs
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import MessageCatalog, MessageKey
from infrastructure.i18n.rules import (
    ExactSet,
    Interval,
    matches_interval,
    parse_rule,
)
from infrastructure.i18n.translator import DEFAULT_LOCALE, Translator

__all__ = [
    "DEFAULT_LOCALE",
    "MessageKey",
    "MessageCatalog",
    "ExactSet",
    "Interval",
    "parse_rule",
    "matches_interval",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "JSONTranslationLoader",
    "Translator",
    "create_translator",
]
