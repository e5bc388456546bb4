"""Test data factories for Slack API payloads."""


def make_slack_member(
    user_id: str = "U00AAAAAAA0",
    presence: str = "away",
    deleted: bool = False,
    is_bot: bool = False,
) -> dict:
    """Create a users.list member entry."""
    return {
        "id": user_id,
        "name": f"user-{user_id.lower()}",
        "deleted": deleted,
        "is_bot": is_bot,
        "presence": presence,
    }


def make_users_list_response(members: list, next_cursor: str = "") -> dict:
    """Create a users.list page."""
    return {
        "ok": True,
        "members": members,
        "response_metadata": {"next_cursor": next_cursor},
    }
