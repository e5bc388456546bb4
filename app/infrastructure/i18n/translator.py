"""Translation service for retrieving, pluralizing and interpolating messages.

Messages use ``:name`` placeholders and ``|``-separated plural forms, the
format of the bundled slackin and validation catalogs:

    translator = Translator(default_locale="en")
    translator.set_messages({"en.slackin": {"join": "Join :team on Slack"}})
    translator.get("slackin.join", {"team": "Acme"})  # "Join Acme on Slack"
"""

import threading
from typing import Any, Mapping, Optional, Tuple, Union

from core.logging import get_module_logger
from infrastructure.i18n import rules
from infrastructure.i18n.models import MessageCatalog, MessageKey

logger = get_module_logger()

DEFAULT_LOCALE = "en"


class Translator:
    """Resolver for translated messages over an in-memory catalog.

    Holds the catalog and the current locale. Lookups never raise: an unknown
    key is returned unchanged so missing translations stay visible.

    A lock guards the catalog and locale, so one instance can be shared
    between threads. Callers rendering for different locales concurrently
    should pass ``locale=`` per call rather than switching the current
    locale.

    Attributes:
        default_locale: Locale used until set_locale() is called.
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        """Initialize Translator.

        Args:
            default_locale: Locale used when none has been set (default: en).
        """
        self.default_locale = default_locale or DEFAULT_LOCALE
        self._locale: Optional[str] = None
        self._catalog: Optional[MessageCatalog] = None
        self._lock = threading.RLock()

    @property
    def catalog(self) -> Optional[MessageCatalog]:
        """The loaded catalog, or None before set_messages()."""
        return self._catalog

    def set_messages(self, messages: Union[MessageCatalog, Mapping[str, Any]]) -> None:
        """Replace the whole catalog.

        The structure is not validated; malformed entries fail their lookups.
        The translator takes ownership of the given mapping.

        Args:
            messages: Mapping of "<locale>.<namespace>" to message trees.
        """
        catalog = MessageCatalog.from_mapping(messages)
        with self._lock:
            self._catalog = catalog
        logger.info("messages_set", source_count=len(catalog))

    def set_locale(self, locale: str) -> None:
        """Set the current locale. Not checked against the catalog.

        Args:
            locale: Locale identifier (e.g., "pt-br").
        """
        with self._lock:
            self._locale = locale

    def get_locale(self) -> str:
        """Return the current locale, or the default if none was set."""
        with self._lock:
            return self._locale or self.default_locale

    def get_available_locales(self) -> list:
        """Locales present in the loaded catalog."""
        with self._lock:
            return self._catalog.locales if self._catalog is not None else []

    def has(self, key: str, *, locale: Optional[str] = None) -> bool:
        """Check if a key resolves to a message.

        Args:
            key: Dot-separated message key.
            locale: Optional locale for this lookup only.

        Returns:
            False for non-string keys, before any catalog is set, or when the
            key does not resolve to a string. True otherwise.
        """
        return self._resolve(key, locale) is not None

    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        *,
        locale: Optional[str] = None,
    ) -> str:
        """Retrieve a translated message.

        Args:
            key: Dot-separated message key (e.g., "validation.between.numeric").
            replacements: Optional placeholder values, names without the colon.
            locale: Optional locale for this lookup only.

        Returns:
            The message with placeholders replaced, or the key itself when no
            message is found.
        """
        message = self._resolve(key, locale)
        if message is None:
            logger.debug("translation_missing", key=key, locale=locale)
            return key

        if replacements:
            message = self.apply_replacements(message, replacements)
        return message

    def choice(
        self,
        key: str,
        count: Union[int, float],
        replacements: Optional[Mapping[str, Any]] = None,
        *,
        locale: Optional[str] = None,
    ) -> str:
        """Retrieve the plural form of a message matching a count.

        The count is available to the message as ``:count``. Forms with an
        explicit rule are tried in order; if none matches, the second form is
        used for counts above one and the first form otherwise. Placeholders
        are replaced in the selected form only.

        Args:
            key: Dot-separated message key.
            count: Number of items.
            replacements: Optional placeholder values.
            locale: Optional locale for this lookup only.

        Returns:
            The selected form with placeholders replaced, or the key itself
            when no message is found.
        """
        values = dict(replacements or {})
        values["count"] = count

        message = self._resolve(key, locale)
        if message is None:
            logger.debug("translation_missing", key=key, locale=locale)
            return key

        forms, explicit_rules = rules.split_candidates(message)
        if len(forms) == 1:
            return self.apply_replacements(message, values)

        selected = None
        for form, rule in zip(forms, explicit_rules):
            if rule is not None and rules.matches_interval(count, rule):
                selected = form
                break

        if selected is None:
            selected = forms[1] if count > 1 else forms[0]

        return self.apply_replacements(selected, values)

    @staticmethod
    def apply_replacements(message: str, replacements: Mapping[str, Any]) -> str:
        """Replace every ``:name`` occurrence with its value.

        Names are applied in mapping order as literal substrings, so a name
        that prefixes another (``:min`` and ``:minimum``) replaces inside the
        longer placeholder when it comes first.

        Args:
            message: Message with ``:name`` placeholders.
            replacements: Mapping of placeholder name to value.

        Returns:
            Message with placeholders replaced.
        """
        for name, value in replacements.items():
            message = message.replace(f":{name}", str(value))
        return message

    def _snapshot(self, locale: Optional[str]) -> Tuple[Optional[MessageCatalog], str]:
        with self._lock:
            return self._catalog, locale or self._locale or self.default_locale

    def _resolve(self, key: Any, locale: Optional[str]) -> Optional[str]:
        if not isinstance(key, str):
            return None

        catalog, effective_locale = self._snapshot(locale)
        if catalog is None:
            return None

        return catalog.lookup(MessageKey.from_string(key), effective_locale)
