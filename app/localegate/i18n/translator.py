"""Message translation helpers.

Looks messages up in a catalog and interpolates positional arguments into
the result. For plural messages the count is always argument 0, so extra
arguments start at ``{1}``:

    translate(catalog, "Hello, {0}!", user_name)
    translate_plural(catalog, "One new message", "{0} new messages", 42)
"""

from typing import Any

from localegate.i18n.exceptions import FormatError
from localegate.i18n.formatter import try_format
from localegate.i18n.models import Catalog, LocalizedCatalog
from localegate.logging import get_module_logger

logger = get_module_logger()


def _format(pattern: str, args: tuple, message_id: str) -> str:
    try:
        return try_format(pattern, args)
    except FormatError as e:
        logger.error(
            "message_format_failed",
            message_id=message_id,
            pattern=pattern,
            arg_count=len(args),
            error=e.reason,
        )
        raise


def translate(catalog: Catalog, message: str, *args: Any) -> str:
    """Translate ``message``, formatting it with ``args`` when given.

    Without arguments the translated text is returned as-is, braces included.

    Raises:
        FormatError: If the translated pattern cannot take ``args``.
    """
    pattern = catalog.lookup(message)
    if not args:
        return pattern
    return _format(pattern, args, message)


def translate_plural(
    catalog: Catalog,
    singular: str,
    plural: str,
    count: int,
    *args: Any,
) -> str:
    """Translate a plural message; ``count`` becomes argument 0.

    Raises:
        FormatError: If the selected pattern cannot take the arguments.
    """
    pattern = catalog.lookup_plural(singular, plural, count)
    return _format(pattern, (count, *args), singular)


class Translator:
    """Request-scoped translator bound to a negotiated catalog.

    Attributes:
        localized: LocalizedCatalog selected for the request.

    Usage:
        _ = Translator(localized)
        _("Hello, {0}!", "Alex")
        _.ngettext("One file", "{0} files", 3)
    """

    def __init__(self, localized: LocalizedCatalog):
        self.localized = localized

    @property
    def locale(self) -> str:
        return self.localized.locale

    def gettext(self, message: str, *args: Any) -> str:
        return translate(self.localized.catalog, message, *args)

    def ngettext(self, singular: str, plural: str, count: int, *args: Any) -> str:
        return translate_plural(self.localized.catalog, singular, plural, count, *args)

    __call__ = gettext
