"""i18n system - locale negotiation and message formatting.

Selects a message catalog for each request from the client's language
preference and renders positional message templates.

Main components:
- models: Catalog, GettextCatalog, MessageCatalog, TranslationTable, LocalizedCatalog
- resolvers: negotiate() and LocaleNegotiator
- formatter: try_format() positional interpolation
- translator: translate(), translate_plural() and Translator
- loader: GettextTranslationLoader, YAMLTranslationLoader and i18n()
- exceptions: FormatError, MissingTranslationError, CatalogLoadError
"""

from localegate.i18n.exceptions import (
    CatalogLoadError,
    FormatError,
    I18nError,
    InvalidPositionalArgumentError,
    MissingTranslationError,
    UnmatchedCurlyBracketError,
)
from localegate.i18n.formatter import try_format
from localegate.i18n.loader import (
    GettextTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    get_loader,
    i18n,
)
from localegate.i18n.models import (
    DEFAULT_LOCALE,
    Catalog,
    GettextCatalog,
    LocalizedCatalog,
    MessageCatalog,
    TranslationTable,
)
from localegate.i18n.resolvers import LocaleNegotiator, negotiate, parse_preferences
from localegate.i18n.translator import Translator, translate, translate_plural

__all__ = [
    "DEFAULT_LOCALE",
    "Catalog",
    "GettextCatalog",
    "MessageCatalog",
    "TranslationTable",
    "LocalizedCatalog",
    "negotiate",
    "parse_preferences",
    "LocaleNegotiator",
    "try_format",
    "translate",
    "translate_plural",
    "Translator",
    "TranslationLoader",
    "GettextTranslationLoader",
    "YAMLTranslationLoader",
    "get_loader",
    "i18n",
    "I18nError",
    "FormatError",
    "UnmatchedCurlyBracketError",
    "InvalidPositionalArgumentError",
    "MissingTranslationError",
    "CatalogLoadError",
]
