"""Slack integration settings."""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack Web API configuration.

    Environment Variables:
        SLACK_TOKEN: Token allowed to list users and send invitations (xoxp-*)
        SLACK_TEAM_NAME: Workspace name shown on the landing page
        SLACK_INVITE_CHANNELS: Channel IDs new members join, comma-separated
            or as a JSON list

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        slack_token = settings.slack.SLACK_TOKEN
        channels = settings.slack.SLACK_INVITE_CHANNELS
        ```
    """

    SLACK_TOKEN: str = ""
    SLACK_TEAM_NAME: str = ""
    SLACK_INVITE_CHANNELS: Annotated[list[str], NoDecode] = Field(
        default_factory=list, alias="SLACK_INVITE_CHANNELS"
    )

    @field_validator("SLACK_INVITE_CHANNELS", mode="before")
    @classmethod
    def _parse_channels(cls, v: Any) -> Any:
        """Accept a JSON list or a comma-separated string of channel IDs."""
        if v is None:
            return []
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid SLACK_INVITE_CHANNELS JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [part.strip() for part in s.split(",") if part.strip()]
        return v
