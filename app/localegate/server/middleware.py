"""HTTP middleware binding request context to structured logs."""

from fastapi import FastAPI, Request

from localegate.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)
from localegate.services import get_settings

logger = get_module_logger()


def add_request_context_middleware(app: FastAPI) -> None:
    """Bind correlation ID, path and method to every log of a request.

    The correlation ID is echoed back in the response headers.
    """

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        header = get_settings().server.CORRELATION_ID_HEADER
        with bind_request_context(
            correlation_id=request.headers.get(header),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
            response.headers[header] = get_correlation_id() or ""
            logger.info("request_completed", status_code=response.status_code)
            return response
