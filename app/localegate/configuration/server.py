"""HTTP server settings."""

from pydantic import Field

from localegate.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP integration configuration.

    Environment Variables:
        ACCEPT_LANGUAGE_HEADER: Request header carrying the client's language
            preference (default: Accept-Language)
        CORRELATION_ID_HEADER: Request header carrying the correlation ID
            (default: X-Correlation-ID)
    """

    ACCEPT_LANGUAGE_HEADER: str = Field(
        default="Accept-Language", alias="ACCEPT_LANGUAGE_HEADER"
    )
    CORRELATION_ID_HEADER: str = Field(
        default="X-Correlation-ID", alias="CORRELATION_ID_HEADER"
    )
