"""Translation loading interface and implementations.

Defines the contract for loading catalogs and provides loaders for compiled
gettext catalogs and for YAML catalogs embedded in the application.

Directory conventions:
    gettext: <translations_dir>/<locale>/LC_MESSAGES/<domain>.mo
    yaml:    <translations_dir>/<locale>/<domain>.yml
"""

import gettext
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Union

import yaml

from localegate.i18n.exceptions import CatalogLoadError
from localegate.i18n.models import (
    Catalog,
    GettextCatalog,
    MessageCatalog,
    TranslationTable,
)
from localegate.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where catalogs for a locale live and how they
    are parsed. Loading is a startup concern: failures are meant to abort.
    """

    def __init__(self, translations_dir: Union[str, Path], domain: str):
        """Initialize loader.

        Args:
            translations_dir: Root directory holding one folder per locale.
            domain: Catalog domain (file stem), e.g. "messages".
        """
        self.translations_dir = Path(translations_dir)
        self.domain = domain

    @abstractmethod
    def catalog_path(self, locale: str) -> Path:
        """Path of the catalog file for ``locale``."""
        pass

    @abstractmethod
    def load(self, locale: str) -> Catalog:
        """Load the catalog for a single locale.

        Raises:
            CatalogLoadError: If the catalog is missing or cannot be parsed.
        """
        pass

    def load_table(self, locales: Iterable[str]) -> TranslationTable:
        """Load catalogs for ``locales`` into a TranslationTable.

        Entries keep the order of ``locales``. Any failure aborts the whole
        load.

        Raises:
            CatalogLoadError: If any catalog cannot be loaded.
        """
        entries = [(locale, self.load(locale)) for locale in locales]
        table = TranslationTable(entries)
        logger.info(
            "loaded_translation_table",
            domain=self.domain,
            translations_dir=str(self.translations_dir),
            locales=list(table.locales),
        )
        return table


class GettextTranslationLoader(TranslationLoader):
    """Loader for compiled gettext (``.mo``) catalogs."""

    def catalog_path(self, locale: str) -> Path:
        return self.translations_dir / locale / "LC_MESSAGES" / f"{self.domain}.mo"

    def load(self, locale: str) -> Catalog:
        path = self.catalog_path(locale)
        try:
            with open(path, "rb") as f:
                translations = gettext.GNUTranslations(f)
        except OSError as e:
            logger.error(
                "catalog_open_failed", locale=locale, path=str(path), error=str(e)
            )
            raise CatalogLoadError(locale, str(path), str(e)) from e
        except (ValueError, KeyError, UnicodeDecodeError) as e:
            logger.error(
                "catalog_parse_failed", locale=locale, path=str(path), error=str(e)
            )
            raise CatalogLoadError(locale, str(path), str(e)) from e

        logger.info("loaded_catalog", locale=locale, path=str(path), format="mo")
        return GettextCatalog(translations)


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML catalogs shipped with the application.

    Expected format:
        messages:
          "Hello, {0}!": "Bonjour, {0} !"
        plurals:
          - singular: "One new message"
            plural: "{0} new messages"
            forms: ["Un nouveau message", "{0} nouveaux messages"]

    Plural forms are selected with the Germanic rule (form 0 for a count of
    one, form 1 otherwise).
    """

    def catalog_path(self, locale: str) -> Path:
        return self.translations_dir / locale / f"{self.domain}.yml"

    def load(self, locale: str) -> Catalog:
        path = self.catalog_path(locale)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            logger.error(
                "catalog_open_failed", locale=locale, path=str(path), error=str(e)
            )
            raise CatalogLoadError(locale, str(path), str(e)) from e
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise CatalogLoadError(locale, str(path), str(e)) from e

        catalog = self._build_catalog(locale, path, data)
        logger.info(
            "loaded_catalog",
            locale=locale,
            path=str(path),
            format="yaml",
            message_count=len(catalog.messages),
            plural_count=len(catalog.plurals),
        )
        return catalog

    def _build_catalog(self, locale: str, path: Path, data: Dict) -> MessageCatalog:
        if not isinstance(data, dict):
            raise CatalogLoadError(locale, str(path), "expected a mapping")

        messages = data.get("messages") or {}
        if not isinstance(messages, dict):
            raise CatalogLoadError(locale, str(path), "'messages' must be a mapping")

        plurals = {}
        for entry in data.get("plurals") or []:
            try:
                key = (str(entry["singular"]), str(entry["plural"]))
                forms = list(entry["forms"])
            except (KeyError, TypeError) as e:
                raise CatalogLoadError(
                    locale, str(path), f"invalid plural entry: {entry!r}"
                ) from e
            # untranslated entries fall back to the message ids, as in gettext
            if not forms or any(_is_untranslated(form) for form in forms):
                logger.warning(
                    "untranslated_plural_skipped",
                    locale=locale,
                    singular=key[0],
                    plural=key[1],
                )
                continue
            plurals[key] = tuple(str(form) for form in forms)

        return MessageCatalog(
            messages={
                str(message_id): str(text)
                for message_id, text in messages.items()
                if not _is_untranslated(text)
            },
            plurals=plurals,
        )


def _is_untranslated(value) -> bool:
    return value is None or value == ""


LOADERS = {
    "mo": GettextTranslationLoader,
    "yaml": YAMLTranslationLoader,
}


def get_loader(
    catalog_format: str,
    translations_dir: Union[str, Path],
    domain: str,
) -> TranslationLoader:
    """Return the loader for ``catalog_format`` ("mo" or "yaml").

    Raises:
        ValueError: If the format is unknown.
    """
    try:
        loader_class = LOADERS[catalog_format]
    except KeyError as e:
        raise ValueError(f"Unsupported catalog format: {catalog_format}") from e
    return loader_class(translations_dir, domain)


def i18n(
    domain: str,
    locales: Iterable[str],
    translations_dir: Union[str, Path] = "translations",
    catalog_format: str = "mo",
) -> TranslationTable:
    """Load the translations of ``domain`` for ``locales``.

    Usage:
        table = i18n("messages", ["en", "fr", "de", "ja"])

    Raises:
        CatalogLoadError: If any catalog is missing or invalid.
    """
    return get_loader(catalog_format, translations_dir, domain).load_table(locales)
