"""Factory functions for creating i18n components.

Builds the process-wide TranslationTable from configuration. Meant to run
once during startup; errors propagate so a deployment with missing catalogs
fails to boot.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from localegate.configuration import settings
from localegate.i18n.loader import get_loader
from localegate.i18n.models import TranslationTable
from localegate.logging import get_module_logger

if TYPE_CHECKING:
    from localegate.configuration import I18nSettings

logger = get_module_logger()


def create_translation_table(
    i18n_settings: Optional["I18nSettings"] = None,
) -> TranslationTable:
    """Load the configured catalogs into a TranslationTable.

    Relative translation directories are resolved against the current
    working directory.

    Args:
        i18n_settings: Catalog settings (default: application settings).

    Returns:
        TranslationTable with one entry per configured locale.

    Raises:
        CatalogLoadError: If a configured catalog is missing or invalid.

    Usage:
        table = create_translation_table()
        app = create_app(table=table)
    """
    i18n_settings = i18n_settings or settings.i18n

    translations_dir = Path(i18n_settings.translations_dir)
    loader = get_loader(
        i18n_settings.catalog_format,
        translations_dir,
        i18n_settings.domain,
    )
    table = loader.load_table(i18n_settings.locales)

    logger.info(
        "translation_table_created",
        catalog_format=i18n_settings.catalog_format,
        translations_dir=str(translations_dir),
        locale_count=len(table),
    )
    return table
