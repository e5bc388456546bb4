"""Message catalog loading interface and implementations.

Defines the contract for loading catalogs and provides a YAML loader for the
bundled locale files and a JSON loader for pre-built catalog bundles.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

import structlog
import yaml

from infrastructure.i18n.models import MessageCatalog, merge_trees

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define where message trees come from and return them
    keyed by "<locale>.<namespace>".
    """

    @abstractmethod
    def load(self, locale: str) -> MessageCatalog:
        """Load the message trees of a single locale.

        Args:
            locale: Locale to load (e.g., "en").

        Returns:
            MessageCatalog with that locale's sources.

        Raises:
            FileNotFoundError: If nothing exists for the locale.
            ValueError: If the source format is invalid.
        """

    @abstractmethod
    def load_all(self) -> MessageCatalog:
        """Load the message trees of every available locale.

        Returns:
            MessageCatalog with all sources.
        """


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML catalog files.

    Expects files named ``<namespace>.<locale>.yml`` whose top-level keys are
    namespaces:

        # slackin.pt-br.yml
        slackin:
          submit: Entrar

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether loaded locales are kept in memory.
        cache: Loaded catalogs by locale.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, MessageCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: str) -> MessageCatalog:
        """Load all ``*.<locale>.yml`` files into one catalog.

        Args:
            locale: Locale to load.

        Returns:
            MessageCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        catalog = MessageCatalog()
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    if data:
                        self._merge_yaml_data(catalog, locale, data, yaml_file)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            namespace_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> MessageCatalog:
        """Load every locale found among the YAML file names.

        Returns:
            MessageCatalog with the sources of all locales.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "slackin.pt-br.yml" -> "pt-br"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2 and parts[-1]:
                locales_found.add(parts[-1])

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = MessageCatalog()
        for locale in sorted(locales_found):
            try:
                result.merge(self.load(locale))
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)

        return result

    def _merge_yaml_data(
        self,
        catalog: MessageCatalog,
        locale: str,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Merge parsed YAML data into catalog under "<locale>.<namespace>"."""
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    namespace=namespace,
                    expected="dict",
                )
                continue

            source = f"{locale}.{namespace}"
            merge_trees(catalog.sources.setdefault(source, {}), messages)

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class JSONTranslationLoader(TranslationLoader):
    """Loader for a single JSON catalog bundle.

    The bundle is one object keyed by "<locale>.<namespace>", the format
    accepted by Translator.set_messages():

        {"en.slackin": {"submit": "Join"}, "pt-br.slackin": {"submit": "Entrar"}}

    Attributes:
        bundle_path: Path to the JSON file.
    """

    def __init__(self, bundle_path: Path):
        """Initialize JSON translation loader.

        Args:
            bundle_path: Path to the JSON bundle.

        Raises:
            ValueError: If the file does not exist.
        """
        self.bundle_path = Path(bundle_path)
        if not self.bundle_path.is_file():
            raise ValueError(f"Translation bundle not found: {self.bundle_path}")

    def load(self, locale: str) -> MessageCatalog:
        catalog = self.load_all()
        prefix = f"{locale}."
        sources = {
            source: tree
            for source, tree in catalog.sources.items()
            if source.startswith(prefix)
        }
        if not sources:
            raise FileNotFoundError(
                f"No translations for locale {locale} in {self.bundle_path}"
            )
        return MessageCatalog(sources=sources)

    def load_all(self) -> MessageCatalog:
        try:
            data = json.loads(self.bundle_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(self.bundle_path), error=str(e))
            raise ValueError(f"Failed to parse {self.bundle_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Translation bundle must be a JSON object: {self.bundle_path}"
            )

        logger.info(
            "loaded_translation_bundle",
            file=str(self.bundle_path),
            source_count=len(data),
        )
        return MessageCatalog(sources=data)
