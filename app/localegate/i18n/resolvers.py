"""Locale negotiation for inbound requests.

Matches the client's language preference (an Accept-Language style header)
against the locales of a TranslationTable. Candidates are tried in the order
they appear in the header; quality values are discarded, not ranked.
"""

import re
from typing import List, Optional

from localegate.i18n.exceptions import MissingTranslationError
from localegate.i18n.models import DEFAULT_LOCALE, LocalizedCatalog, TranslationTable
from localegate.logging import get_module_logger

logger = get_module_logger()

_SUBTAG_SEPARATORS = re.compile(r"[-;]")


def parse_preferences(raw_preference: Optional[str]) -> List[str]:
    """Reduce a raw preference header to bare language tags, in order.

    "fr-FR,en;q=0.8" -> ["fr", "en"]. Tokens are not trimmed or case-folded;
    tokens with no language segment (e.g. "-CA") are dropped.

    Args:
        raw_preference: Header value, or None when the header is absent.

    Returns:
        Candidate language tags in header order.
    """
    if raw_preference is None:
        return [DEFAULT_LOCALE]

    candidates = []
    for token in raw_preference.split(","):
        language = _SUBTAG_SEPARATORS.split(token, maxsplit=1)[0]
        if language:
            candidates.append(language)
    return candidates


def negotiate(
    raw_preference: Optional[str],
    table: TranslationTable,
) -> LocalizedCatalog:
    """Select the locale and catalog to use for a request.

    The first candidate with an exact entry in the table wins; otherwise the
    default locale ("en") is used.

    Args:
        raw_preference: Accept-Language header value, or None if absent.
        table: Translations loaded at startup.

    Returns:
        LocalizedCatalog for the selected locale.

    Raises:
        MissingTranslationError: If the selected locale (including the
            default) has no entry in the table.
    """
    candidates = parse_preferences(raw_preference)
    locale = next((c for c in candidates if c in table), None)

    if locale is None:
        logger.debug(
            "no_matching_locale_in_header",
            candidates=candidates,
            default=DEFAULT_LOCALE,
        )
        locale = DEFAULT_LOCALE

    catalog = table.get(locale)
    if catalog is None:
        logger.warning(
            "missing_translation",
            locale=locale,
            available_locales=list(table.locales),
        )
        raise MissingTranslationError(locale)

    logger.debug("resolved_from_header", locale=locale)
    return LocalizedCatalog(locale=locale, catalog=catalog)


class LocaleNegotiator:
    """Negotiates locales against a table fixed at construction time.

    Attributes:
        table: TranslationTable shared by all requests.
    """

    def __init__(self, table: TranslationTable):
        self.table = table

    @property
    def available_locales(self) -> List[str]:
        return list(self.table.locales)

    def negotiate(self, raw_preference: Optional[str]) -> LocalizedCatalog:
        """Negotiate against the bound table. See :func:`negotiate`."""
        return negotiate(raw_preference, self.table)

    def supports(self, locale: str) -> bool:
        return locale in self.table
