from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from localegate.api.router import api_router
from localegate.i18n import FormatError, MissingTranslationError, TranslationTable
from localegate.logging import get_module_logger
from localegate.server.lifespan import lifespan
from localegate.server.middleware import add_request_context_middleware

logger = get_module_logger()


async def missing_translation_handler(
    request: Request, exc: MissingTranslationError
) -> JSONResponse:
    """Incomplete catalog set: a server configuration error, not a client one."""
    logger.error(
        "missing_translation",
        locale=exc.locale,
        path=request.url.path,
    )
    return JSONResponse(status_code=500, content={"detail": str(exc)})


async def format_error_handler(request: Request, exc: FormatError) -> JSONResponse:
    """A translated pattern that does not fit its arguments is a catalog bug."""
    logger.error(
        "message_format_error",
        pattern=exc.pattern,
        error=exc.reason,
        path=request.url.path,
    )
    return JSONResponse(status_code=500, content={"detail": "Message formatting error"})


def create_app(table: Optional[TranslationTable] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        table: Pre-built TranslationTable. When omitted the lifespan loads
            it from settings at startup.

    Usage:
        uvicorn localegate.server.server:create_app --factory
    """
    handler = FastAPI(lifespan=lifespan)
    if table is not None:
        handler.state.translation_table = table

    add_request_context_middleware(handler)
    handler.add_exception_handler(MissingTranslationError, missing_translation_handler)
    handler.add_exception_handler(FormatError, format_error_handler)
    handler.include_router(api_router)
    return handler
