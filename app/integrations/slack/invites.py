"""Slack Invite Modules.

Sends workspace invitations by email through the Web API.
"""

from typing import Iterable, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from core.logging import get_module_logger

logger = get_module_logger()

INVITE_METHOD = "users.admin.invite"


class InviteError(Exception):
    """Raised when Slack refuses or fails an invitation.

    Attributes:
        reason: Slack error code (e.g., "already_invited") or "unknown".
    """

    def __init__(self, reason: str):
        super().__init__(f"Slack invitation failed: {reason}")
        self.reason = reason


def send_invite(
    client: WebClient,
    email: str,
    first_name: Optional[str] = None,
    channels: Optional[Iterable[str]] = None,
):
    """Invite an email address to the workspace.

    Args:
        client (WebClient): The Slack client instance.
        email (str): Address to invite.
        first_name (str, optional): Name shown in the invitation.
        channels (Iterable[str], optional): Channel IDs to join on signup.

    Returns:
        SlackResponse: The Slack response.

    Raises:
        InviteError: If Slack answers with an error.
    """
    data = {"email": email, "set_active": True}
    if first_name:
        data["first_name"] = first_name
    channel_ids = list(channels or [])
    if channel_ids:
        data["channels"] = ",".join(channel_ids)

    try:
        response = client.api_call(INVITE_METHOD, data=data)
    except SlackApiError as e:
        reason = e.response.get("error", "unknown") if e.response else "unknown"
        logger.warning("slack_invite_failed", email=email, error=reason)
        raise InviteError(reason) from e

    if not response.get("ok", False):
        reason = response.get("error", "unknown")
        logger.warning("slack_invite_failed", email=email, error=reason)
        raise InviteError(reason)

    logger.info("slack_invite_sent", email=email, channel_count=len(channel_ids))
    return response
