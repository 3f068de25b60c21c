"""localegate configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localegate.configuration.i18n import I18nSettings
from localegate.configuration.server import ServerSettings


class Settings(BaseSettings):
    """localegate configuration settings - main aggregator.

    Aggregates domain-specific settings into a single configuration object:

    - **i18n**: Translation catalogs to load at startup
    - **server**: HTTP integration (header names)

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from localegate.services import get_settings

        settings = get_settings()
        domain = settings.i18n.domain
        header = settings.server.ACCEPT_LANGUAGE_HEADER
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
