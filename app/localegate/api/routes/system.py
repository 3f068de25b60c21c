from fastapi import APIRouter

from localegate.services import SettingsDep, TranslationTableDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}


@router.get("/locales")
def get_locales(table: TranslationTableDep):
    """Locales loaded at startup, in negotiation order."""
    return {"locales": list(table.locales)}
