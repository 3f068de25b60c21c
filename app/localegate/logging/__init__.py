"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - bind_locale(): Add the negotiated locale to the request context
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context
"""

from localegate.logging.setup import configure_logging, get_module_logger
from localegate.logging.context import (
    bind_locale,
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "bind_locale",
    "get_correlation_id",
    "clear_request_context",
]
