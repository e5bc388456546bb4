"""Slackin service - online users and invitation workflow."""

from typing import Iterable, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from core.logging import get_module_logger
from infrastructure.i18n import Translator
from integrations.slack import invites, users
from modules.slackin.models import InviteForm, InviteOutcome, UsersOnline
from modules.slackin.validation import validate_invite

logger = get_module_logger()


class SlackinService:
    """Coordinates Slack access and localized messages for the invite page.

    Attributes:
        client: Slack WebClient, or None when no token is configured.
        translator: Translator used for every user-facing message.
        team_name: Workspace name shown on the page.
        invite_channels: Channel IDs invited members join.
    """

    def __init__(
        self,
        client: Optional[WebClient],
        translator: Translator,
        team_name: str = "",
        invite_channels: Optional[Iterable[str]] = None,
    ):
        self.client = client
        self.translator = translator
        self.team_name = team_name
        self.invite_channels = list(invite_channels or [])

    def get_users_online(self) -> Optional[UsersOnline]:
        """Count workspace members and those currently active.

        Returns:
            UsersOnline, or None when Slack is not configured or the member
            list could not be retrieved.
        """
        if self.client is None:
            logger.info("users_online_unavailable", reason="slack_not_configured")
            return None

        try:
            members = users.get_all_users(self.client, presence=True, raise_errors=True)
        except SlackApiError as e:
            logger.warning(
                "users_online_unavailable", reason="slack_error", error=str(e)
            )
            return None

        counters = UsersOnline(
            total=len(members),
            active=sum(1 for member in members if users.is_active(member)),
        )
        logger.info("users_online_counted", total=counters.total, active=counters.active)
        return counters

    def users_online_text(
        self, counters: UsersOnline, locale: Optional[str] = None
    ) -> str:
        """Localized sentence describing the online users."""
        return self.translator.choice(
            "slackin.users_online",
            counters.active,
            {"total": counters.total, "active": counters.active},
            locale=locale,
        )

    def invite(self, form: InviteForm, locale: Optional[str] = None) -> InviteOutcome:
        """Validate the form and send the Slack invitation.

        Args:
            form: Submitted invite form.
            locale: Locale of the returned messages.

        Returns:
            InviteOutcome with the confirmation or the error messages.
        """
        form = form.normalized()
        errors = validate_invite(form, self.translator, locale)
        if errors:
            logger.info("invite_rejected", error_count=len(errors))
            return InviteOutcome(sent=False, errors=errors)

        if self.client is None:
            logger.error("invite_failed", reason="slack_not_configured")
            return InviteOutcome(
                sent=False,
                errors=[self.translator.get("validation.wrong", locale=locale)],
                reason="not_configured",
            )

        try:
            invites.send_invite(
                self.client,
                form.email,
                first_name=form.username,
                channels=self.invite_channels,
            )
        except invites.InviteError as e:
            return InviteOutcome(
                sent=False,
                errors=[self.translator.get("validation.wrong", locale=locale)],
                reason=e.reason,
            )

        logger.info("invite_sent", email=form.email)
        return InviteOutcome(
            sent=True,
            message=self.translator.get("slackin.invited", locale=locale),
        )
