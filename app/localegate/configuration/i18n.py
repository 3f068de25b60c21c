"""Translation catalog settings."""

from typing import Annotated, List, Literal

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from localegate.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation table configuration.

    Environment Variables:
        I18N_DOMAIN: Catalog domain, i.e. the catalog file stem (default: messages)
        I18N_LOCALES: Comma separated locales to load, in table order (default: en)
        I18N_TRANSLATIONS_DIR: Root directory of the catalogs (default: translations)
        I18N_CATALOG_FORMAT: "mo" for compiled gettext catalogs, "yaml" for
            embedded YAML catalogs (default: mo)

    Example:
        ```python
        from localegate.services import get_settings

        settings = get_settings()
        locales = settings.i18n.locales
        ```
    """

    domain: str = Field(default="messages", alias="I18N_DOMAIN")
    locales: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_LOCALES",
    )
    translations_dir: str = Field(default="translations", alias="I18N_TRANSLATIONS_DIR")
    catalog_format: Literal["mo", "yaml"] = Field(
        default="mo",
        alias="I18N_CATALOG_FORMAT",
    )

    @field_validator("locales", mode="before")
    @classmethod
    def split_locales(cls, v):
        """Accept "en,fr,de" as well as a list."""
        if isinstance(v, str):
            return [locale.strip() for locale in v.split(",") if locale.strip()]
        return v
