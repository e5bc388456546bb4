"""Slack User Modules.

This module contains the user related functionality for the Slack integration.
"""

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from core.logging import get_module_logger

logger = get_module_logger()


def get_all_users(
    client: WebClient, deleted=False, is_bot=False, presence=False, raise_errors=False
):
    """Get all users from the Slack workspace.

    Args:
        client (WebClient): The Slack client instance.
        deleted (bool, optional): Include deleted users. Defaults to False.
        is_bot (bool, optional): Include bot users. Defaults to False.
        presence (bool, optional): Ask Slack to include each member's
            presence. Defaults to False.
        raise_errors (bool, optional): Raise SlackApiError instead of returning
            the users collected before the failure. Defaults to False.

    Returns:
        list: The users collected, possibly partial if Slack failed midway.

    Raises:
        SlackApiError: If raise_errors is set and a page could not be listed.
    """

    users_list = []
    cursor = None
    try:
        while True:
            response = client.users_list(cursor=cursor, limit=200, presence=presence)
            if response["ok"]:
                if "members" in response:
                    users_list.extend(response["members"])
                cursor = response.get("response_metadata", {}).get("next_cursor")
                if not cursor:
                    break
            else:
                if raise_errors:
                    raise SlackApiError(
                        f"users.list failed: {response.get('error')}", response
                    )
                logger.error("slack_users_list_failed", error=response.get("error"))
                break
    except SlackApiError as e:
        logger.error("slack_users_list_failed", error=str(e))
        if raise_errors:
            raise

    # filters
    if not deleted:
        users_list = [user for user in users_list if not user.get("deleted")]
    if not is_bot:
        users_list = [user for user in users_list if not user.get("is_bot")]

    return users_list


def is_active(user: dict) -> bool:
    """Whether a member returned with presence is currently active."""
    return user.get("presence") == "active"
