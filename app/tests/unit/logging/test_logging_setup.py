"""Unit tests for localegate.logging.setup module."""

import importlib
from unittest.mock import Mock

import pytest
import structlog

from localegate.configuration import Settings
from localegate.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_detects_pytest(self):
        assert _is_test_environment() is True

    def test_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_accepts_overrides(self, mock_settings):
        logger = configure_logging(
            settings=mock_settings, log_level="DEBUG", is_production=True
        )
        assert logger is not None

    def test_logging_does_not_raise(self, mock_settings):
        logger = configure_logging(settings=mock_settings)
        logger.info("test_event", locale="fr")


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_module_context(self):
        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    @pytest.mark.parametrize(
        "module_path",
        [
            "localegate.i18n.factory",
            "localegate.i18n.loader",
            "localegate.i18n.resolvers",
            "localegate.i18n.translator",
        ],
    )
    def test_i18n_modules_bind_module_context(self, module_path):
        module = importlib.import_module(module_path)
        context = structlog.get_context(module.logger)

        assert context["module_path"] == module_path
        assert context["component"] == module_path.split(".")[-1]
