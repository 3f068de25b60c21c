from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from localegate.logging import get_module_logger
from localegate.services import get_settings, get_translation_table

logger = get_module_logger()


def _load_translations(app: FastAPI) -> None:
    if getattr(app.state, "translation_table", None) is not None:
        logger.info(
            "translation_table_provided",
            locales=list(app.state.translation_table.locales),
        )
        return

    try:
        app.state.translation_table = get_translation_table()
    except Exception as exc:
        logger.error("translation_table_load_failed", error=str(exc))
        raise

    logger.info(
        "translation_table_loaded",
        locales=list(app.state.translation_table.locales),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the translation table once before serving requests.

    Missing catalogs abort startup.
    """
    settings = get_settings()
    logger.info("application_startup", git_sha=settings.GIT_SHA)
    _load_translations(app)
    yield
    logger.info("application_shutdown")
