"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with the
application's bundled catalogs and configured default locale.
"""

from pathlib import Path
from typing import Optional

import structlog

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.translator import DEFAULT_LOCALE, Translator

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the bundled locales directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    default_locale: str = DEFAULT_LOCALE,
    use_cache: bool = True,
    preload: bool = True,
    loader: Optional[TranslationLoader] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML catalog files (default: app/locales).
        default_locale: Locale used until one is set (default: en).
        use_cache: Whether the YAML loader caches parsed files.
        preload: Whether to load every locale immediately.
        loader: Loader to use instead of a YAML loader over translations_dir.

    Returns:
        Translator: Configured translator instance.

    Raises:
        ValueError: If translations_dir does not exist.

    Usage:
        # Bundled catalogs, all locales loaded
        translator = create_translator()

        # Custom directory, Portuguese by default
        translator = create_translator(Path("/srv/locales"), default_locale="pt-br")
    """
    if loader is None:
        if translations_dir is None:
            translations_dir = default_translations_dir()
        loader = YAMLTranslationLoader(
            translations_dir=translations_dir,
            use_cache=use_cache,
        )

    translator = Translator(default_locale=default_locale)

    if preload:
        translator.set_messages(loader.load_all())
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir) if translations_dir else None,
            locales=translator.get_available_locales(),
        )
    else:
        translator.set_messages(loader.load(default_locale))
        logger.info(
            "translator_created_with_default_locale",
            translations_dir=str(translations_dir) if translations_dir else None,
            default_locale=default_locale,
        )

    return translator
