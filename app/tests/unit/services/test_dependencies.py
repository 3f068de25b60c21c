"""Unit tests for localegate.services.dependencies module."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from localegate.i18n import MissingTranslationError, TranslationTable
from localegate.services import I18nDep, TranslationTableDep, TranslatorDep
from localegate.services import providers


def _build_app(table=None) -> FastAPI:
    app = FastAPI()
    if table is not None:
        app.state.translation_table = table

    @app.get("/negotiated")
    def negotiated(localized: I18nDep):
        return {"locale": localized.locale}

    @app.get("/translated")
    def translated(_: TranslatorDep):
        return {"text": _("Hello, {0}!", "Alex")}

    @app.get("/table")
    def table_locales(table: TranslationTableDep):
        return {"locales": list(table.locales)}

    return app


@pytest.mark.unit
class TestI18nDependency:
    """Test suite for the negotiated catalog dependency."""

    @pytest.fixture
    def client(self, translation_table):
        return TestClient(_build_app(translation_table))

    def test_header_selects_locale(self, client):
        response = client.get("/negotiated", headers={"Accept-Language": "fr-FR,en"})
        assert response.json() == {"locale": "fr"}

    def test_absent_header_uses_default(self, client):
        assert client.get("/negotiated").json() == {"locale": "en"}

    def test_unsupported_header_falls_back(self, client):
        response = client.get("/negotiated", headers={"Accept-Language": "de-DE"})
        assert response.json() == {"locale": "en"}

    def test_translator(self, client):
        response = client.get("/translated", headers={"Accept-Language": "fr"})
        assert response.json() == {"text": "Bonjour, Alex !"}

    def test_custom_header_name(self, monkeypatch, client):
        monkeypatch.setenv("ACCEPT_LANGUAGE_HEADER", "X-Lang")
        response = client.get(
            "/negotiated", headers={"X-Lang": "fr", "Accept-Language": "en"}
        )
        assert response.json() == {"locale": "fr"}

    def test_missing_translation_raised(self, french_catalog):
        client = TestClient(_build_app(TranslationTable([("fr", french_catalog)])))
        with pytest.raises(MissingTranslationError):
            client.get("/negotiated", headers={"Accept-Language": "de"})


@pytest.mark.unit
class TestTranslationTableDependency:
    """Test suite for the translation table dependency."""

    def test_prefers_app_state(self, translation_table):
        client = TestClient(_build_app(translation_table))
        assert client.get("/table").json() == {"locales": ["en", "fr"]}

    def test_falls_back_to_provider(self, monkeypatch, mo_translations_dir):
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(mo_translations_dir))
        monkeypatch.setenv("I18N_LOCALES", "fr")
        providers.get_translation_table.cache_clear()

        client = TestClient(_build_app())
        assert client.get("/table").json() == {"locales": ["fr"]}
