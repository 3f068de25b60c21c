"""Unit tests for localegate.services.providers module."""

import pytest

from localegate.i18n import CatalogLoadError, TranslationTable
from localegate.services import providers


@pytest.mark.unit
class TestGetTranslationTable:
    """Test suite for get_translation_table provider."""

    def test_loads_from_settings(self, monkeypatch, mo_translations_dir):
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(mo_translations_dir))
        monkeypatch.setenv("I18N_LOCALES", "en,fr")

        table = providers.get_translation_table()

        assert isinstance(table, TranslationTable)
        assert table.locales == ("en", "fr")

    def test_cached(self, monkeypatch, mo_translations_dir):
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(mo_translations_dir))
        monkeypatch.setenv("I18N_LOCALES", "en")

        assert providers.get_translation_table() is providers.get_translation_table()

    def test_missing_catalog_propagates(self, monkeypatch, tmp_path):
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(tmp_path))
        monkeypatch.setenv("I18N_LOCALES", "en")

        with pytest.raises(CatalogLoadError):
            providers.get_translation_table()
