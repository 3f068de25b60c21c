"""Translation models for i18n system.

Defines the catalog capability, the concrete catalogs backing it, and the
immutable translation table negotiated against on every request.
"""

import gettext
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Callable,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

DEFAULT_LOCALE = "en"

PluralRule = Callable[[int], int]


def germanic_plural(count: int) -> int:
    """Default plural rule: form 0 for exactly one, form 1 otherwise."""
    return int(count != 1)


@runtime_checkable
class Catalog(Protocol):
    """Read-only message catalog capability.

    Missing ids are returned unchanged (the singular id when ``count == 1``,
    the plural id otherwise), following gettext convention.
    """

    def lookup(self, message_id: str) -> str: ...

    def lookup_plural(self, singular_id: str, plural_id: str, count: int) -> str: ...


class GettextCatalog:
    """Catalog backed by a compiled gettext (``.mo``) translation.

    Plural selection is resolved by the ``Plural-Forms`` header of the
    compiled catalog.

    Attributes:
        translations: Underlying GNUTranslations (or NullTranslations).
    """

    __slots__ = ("translations",)

    def __init__(
        self,
        translations: Union[gettext.GNUTranslations, gettext.NullTranslations],
    ):
        self.translations = translations

    def lookup(self, message_id: str) -> str:
        return self.translations.gettext(message_id)

    def lookup_plural(self, singular_id: str, plural_id: str, count: int) -> str:
        return self.translations.ngettext(singular_id, plural_id, count)

    def __repr__(self) -> str:
        return f"GettextCatalog({type(self.translations).__name__})"


@dataclass(frozen=True, eq=False)
class MessageCatalog:
    """In-memory catalog for translations embedded in the application.

    Frozen, with read-only maps. Shared by reference across requests.

    Attributes:
        messages: Message id -> localized pattern.
        plurals: (singular id, plural id) -> localized plural forms.
        plural_rule: Maps a count to an index into the plural forms.
    """

    messages: Mapping[str, str] = field(default_factory=dict)
    plurals: Mapping[Tuple[str, str], Tuple[str, ...]] = field(default_factory=dict)
    plural_rule: PluralRule = germanic_plural

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(
            self,
            "plurals",
            MappingProxyType(
                {key: tuple(forms) for key, forms in self.plurals.items()}
            ),
        )

    def lookup(self, message_id: str) -> str:
        return self.messages.get(message_id, message_id)

    def lookup_plural(self, singular_id: str, plural_id: str, count: int) -> str:
        forms = self.plurals.get((singular_id, plural_id))
        if forms:
            index = self.plural_rule(count)
            if 0 <= index < len(forms):
                return forms[index]
        return singular_id if count == 1 else plural_id


TableEntry = Tuple[str, Catalog]


class TranslationTable:
    """Ordered, immutable collection of (locale tag, catalog) entries.

    Locale tags are compared by exact string equality. Duplicate tags are
    allowed; lookups return the first entry.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[TableEntry] = ()):
        object.__setattr__(self, "_entries", tuple(tuple(e) for e in entries))

    def __setattr__(self, name, value):
        raise AttributeError("TranslationTable is immutable")

    @property
    def entries(self) -> Tuple[TableEntry, ...]:
        return self._entries

    @property
    def locales(self) -> Tuple[str, ...]:
        """Locale tags in table order (duplicates included)."""
        return tuple(locale for locale, _ in self._entries)

    def get(self, locale: str) -> Optional[Catalog]:
        """Return the catalog of the first entry tagged ``locale``, if any."""
        for tag, catalog in self._entries:
            if tag == locale:
                return catalog
        return None

    def __contains__(self, locale: object) -> bool:
        return any(tag == locale for tag, _ in self._entries)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TranslationTable(locales={list(self.locales)!r})"


@dataclass(frozen=True)
class LocalizedCatalog:
    """Negotiated (locale, catalog) pair for a single request.

    Holds a reference to the shared catalog; nothing is copied.

    Attributes:
        locale: Selected locale tag.
        catalog: Catalog registered for that tag.
    """

    locale: str
    catalog: Catalog

    def gettext(self, message_id: str) -> str:
        return self.catalog.lookup(message_id)

    def ngettext(self, singular_id: str, plural_id: str, count: int) -> str:
        return self.catalog.lookup_plural(singular_id, plural_id, count)
