"""Service providers and FastAPI dependency aliases."""

from localegate.services.dependencies import (
    I18nDep,
    SettingsDep,
    TranslationTableDep,
    TranslatorDep,
)
from localegate.services.providers import get_settings, get_translation_table

__all__ = [
    "get_settings",
    "get_translation_table",
    "SettingsDep",
    "TranslationTableDep",
    "I18nDep",
    "TranslatorDep",
]
