"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from localegate.configuration import Settings
from localegate.i18n.factory import create_translation_table
from localegate.i18n.models import TranslationTable


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from localegate.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_table() -> TranslationTable:
    """
    Get the process-wide TranslationTable, loading it on first use.

    The table is immutable and shared by all requests. Catalog load errors
    propagate so a misconfigured deployment fails immediately.

    Returns:
        TranslationTable: Cached table built from settings.i18n.
    """
    return create_translation_table(get_settings().i18n)
