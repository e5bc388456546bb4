"""Models for the slackin module."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class UsersOnline:
    """Workspace member counters shown on the page and the badge.

    Attributes:
        total: Members that are neither deleted nor bots.
        active: Members among them currently present.
    """

    total: int
    active: int


@dataclass
class InviteForm:
    """Submitted invite form.

    Attributes:
        username: Name and last name typed by the visitor.
        email: Address the invitation is sent to.
    """

    username: str = ""
    email: str = ""

    def normalized(self) -> "InviteForm":
        return InviteForm(username=self.username.strip(), email=self.email.strip())


@dataclass
class InviteOutcome:
    """Result of an invite submission.

    Attributes:
        sent: Whether Slack accepted the invitation.
        message: Localized confirmation, if sent.
        errors: Localized validation or failure messages.
        reason: Why the invitation was not sent (a Slack error code,
            "not_configured" or "rate_limited").
    """

    sent: bool
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    reason: Optional[str] = None
