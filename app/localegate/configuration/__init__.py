"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation catalog settings
    ServerSettings: HTTP integration settings

Example:
    ```python
    from localegate.services import get_settings

    settings = get_settings()

    locales = settings.i18n.locales
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from localegate.configuration.i18n import I18nSettings
from localegate.configuration.server import ServerSettings
from localegate.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "I18nSettings", "ServerSettings"]
