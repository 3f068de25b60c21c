"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for settings, the translation table and the
per-request negotiated catalog.
"""

from typing import Annotated

from fastapi import Depends, Request

from localegate.configuration import Settings
from localegate.i18n import (
    LocalizedCatalog,
    TranslationTable,
    Translator,
    negotiate,
)
from localegate.logging import bind_locale
from localegate.services.providers import get_settings, get_translation_table

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_request_translation_table(request: Request) -> TranslationTable:
    """Table stored on app.state by the lifespan, else the process provider."""
    table = getattr(request.app.state, "translation_table", None)
    if table is None:
        table = get_translation_table()
    return table


TranslationTableDep = Annotated[
    TranslationTable, Depends(get_request_translation_table)
]


async def get_localized_catalog(
    request: Request,
    table: TranslationTableDep,
    settings: SettingsDep,
) -> LocalizedCatalog:
    """Negotiate the catalog for the request's language preference header.

    Raises:
        MissingTranslationError: If no usable locale is loaded. The server
            maps it to a 500 response.
    """
    raw_preference = request.headers.get(settings.server.ACCEPT_LANGUAGE_HEADER)
    localized = negotiate(raw_preference, table)
    bind_locale(localized.locale)
    return localized


# Negotiated catalog dependency
# Usage: localized.locale, localized.gettext("Hello, world!")
I18nDep = Annotated[LocalizedCatalog, Depends(get_localized_catalog)]


def get_translator(localized: I18nDep) -> Translator:
    return Translator(localized)


# Translator dependency
# Usage: _("Hello, {0}!", name), _.ngettext("One file", "{0} files", count)
TranslatorDep = Annotated[Translator, Depends(get_translator)]

__all__ = [
    "SettingsDep",
    "TranslationTableDep",
    "I18nDep",
    "TranslatorDep",
    "get_request_translation_table",
    "get_localized_catalog",
    "get_translator",
]
