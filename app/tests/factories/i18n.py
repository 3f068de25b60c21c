"""Test data factories for i18n system testing.

Provides deterministic builders for:
- MessageCatalog
- TranslationTable
- Compiled gettext catalogs on disk (via Babel)
- YAML catalogs on disk
"""

from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

import yaml
from babel.messages.catalog import Catalog as BabelCatalog
from babel.messages.mofile import write_mo

from localegate.i18n import MessageCatalog, TranslationTable

PluralEntries = Dict[Tuple[str, str], Sequence[str]]


FRENCH_MESSAGES = {
    "Hello, world!": "Bonjour, le monde !",
    "Hello, {0}!": "Bonjour, {0} !",
}
FRENCH_PLURALS = {
    ("You have one new notification", "You have {0} new notifications"): (
        "Vous avez une nouvelle notification",
        "Vous avez {0} nouvelles notifications",
    ),
}


def make_message_catalog(
    messages: Optional[Dict[str, str]] = None,
    plurals: Optional[PluralEntries] = None,
) -> MessageCatalog:
    """Create a MessageCatalog instance.

    Args:
        messages: Message id -> translation (default: French greetings).
        plurals: (singular, plural) -> forms (default: French notifications).

    Returns:
        MessageCatalog instance.
    """
    return MessageCatalog(
        messages=FRENCH_MESSAGES if messages is None else messages,
        plurals=FRENCH_PLURALS if plurals is None else plurals,
    )


def make_translation_table(**catalogs: MessageCatalog) -> TranslationTable:
    """Create a TranslationTable from keyword arguments, in argument order.

    With no arguments returns {"en": identity catalog, "fr": French catalog}.
    """
    if not catalogs:
        catalogs = {
            "en": make_message_catalog(messages={}, plurals={}),
            "fr": make_message_catalog(),
        }
    return TranslationTable(catalogs.items())


def write_mo_catalog(
    translations_dir: Path,
    locale: str,
    domain: str = "messages",
    messages: Optional[Dict[str, str]] = None,
    plurals: Optional[PluralEntries] = None,
) -> Path:
    """Compile a gettext catalog to <dir>/<locale>/LC_MESSAGES/<domain>.mo.

    Plural-Forms come from Babel's locale data for ``locale``.

    Returns:
        Path of the written .mo file.
    """
    catalog = BabelCatalog(locale=locale, domain=domain)
    for msgid, msgstr in (messages or {}).items():
        catalog.add(msgid, msgstr)
    for (singular, plural), forms in (plurals or {}).items():
        catalog.add((singular, plural), tuple(forms))

    path = Path(translations_dir) / locale / "LC_MESSAGES" / f"{domain}.mo"
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        write_mo(f, catalog)
    return path


def write_yaml_catalog(
    translations_dir: Path,
    locale: str,
    domain: str = "messages",
    messages: Optional[Dict[str, str]] = None,
    plurals: Optional[PluralEntries] = None,
) -> Path:
    """Write an embedded YAML catalog to <dir>/<locale>/<domain>.yml.

    Returns:
        Path of the written file.
    """
    data = {
        "messages": dict(messages or {}),
        "plurals": [
            {"singular": singular, "plural": plural, "forms": list(forms)}
            for (singular, plural), forms in (plurals or {}).items()
        ],
    }
    path = Path(translations_dir) / locale / f"{domain}.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path
