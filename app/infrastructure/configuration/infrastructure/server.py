"""Web server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        INVITE_RATE_LIMIT: slowapi limit applied per client to POST /invite
        BADGE_CACHE_SECONDS: Cache-Control max-age sent with the badge

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        invite_limit = settings.server.INVITE_RATE_LIMIT
        ```
    """

    INVITE_RATE_LIMIT: str = Field(default="5/minute", alias="INVITE_RATE_LIMIT")
    BADGE_CACHE_SECONDS: int = Field(default=60, alias="BADGE_CACHE_SECONDS")
