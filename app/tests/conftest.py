"""Shared fixtures for localegate tests."""

import pytest

from localegate.services import providers
from tests.factories.i18n import (
    FRENCH_MESSAGES,
    FRENCH_PLURALS,
    make_message_catalog,
    make_translation_table,
    write_mo_catalog,
)


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached singletons so env overrides take effect per test."""
    providers.get_settings.cache_clear()
    providers.get_translation_table.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_translation_table.cache_clear()


@pytest.fixture
def english_catalog():
    """Catalog with no translations: every id maps to itself."""
    return make_message_catalog(messages={}, plurals={})


@pytest.fixture
def french_catalog():
    return make_message_catalog()


@pytest.fixture
def translation_table(english_catalog, french_catalog):
    """Table {"en": E, "fr": F}."""
    return make_translation_table(en=english_catalog, fr=french_catalog)


@pytest.fixture
def mo_translations_dir(tmp_path):
    """Directory with compiled en/fr catalogs for the "messages" domain."""
    translations_dir = tmp_path / "translations"
    write_mo_catalog(translations_dir, "en")
    write_mo_catalog(
        translations_dir,
        "fr",
        messages=FRENCH_MESSAGES,
        plurals=FRENCH_PLURALS,
    )
    return translations_dir
