"""Localized validation of the invite form.

Messages come from the `validation` namespace with `:attribute` replaced by
the translated field name from `validation.attributes`.
"""

from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from core.logging import get_module_logger
from infrastructure.i18n import Translator
from modules.slackin.models import InviteForm

logger = get_module_logger()

MAX_LENGTH = 255


def _attribute(translator: Translator, field: str, locale: Optional[str]) -> str:
    return translator.get(f"validation.attributes.{field}", locale=locale)


def validate_invite(
    form: InviteForm,
    translator: Translator,
    locale: Optional[str] = None,
) -> List[str]:
    """Validate an invite form.

    Args:
        form: Submitted form, already stripped of surrounding whitespace.
        translator: Translator used for the messages.
        locale: Locale of the messages (default: translator's current locale).

    Returns:
        List of localized error messages, empty when the form is valid.
    """
    errors = []

    for field_name in ("username", "email"):
        value = getattr(form, field_name)
        attribute = _attribute(translator, field_name, locale)
        if not value:
            errors.append(
                translator.get(
                    "validation.required", {"attribute": attribute}, locale=locale
                )
            )
        elif len(value) > MAX_LENGTH:
            errors.append(
                translator.get(
                    "validation.max.string",
                    {"attribute": attribute, "max": MAX_LENGTH},
                    locale=locale,
                )
            )

    if form.email and len(form.email) <= MAX_LENGTH:
        try:
            validate_email(form.email, check_deliverability=False)
        except EmailNotValidError as e:
            logger.info("invite_email_rejected", error=str(e))
            errors.append(
                translator.get(
                    "validation.email",
                    {"attribute": _attribute(translator, "email", locale)},
                    locale=locale,
                )
            )

    return errors
