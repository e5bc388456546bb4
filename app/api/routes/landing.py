"""Landing page routes for slackin.

Renders the invitation page in the selected locale and accepts invite
submissions.
"""

from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from api.dependencies.rate_limits import (
    get_limiter,
    invite_rate_limit,
    register_html_fallback,
)
from core.logging import get_module_logger
from infrastructure.i18n import Translator
from infrastructure.services import (
    SlackinServiceDep,
    TranslatorDep,
    get_slackin_service,
    get_translator,
)
from modules.slackin.models import InviteForm, InviteOutcome
from modules.slackin.pages import render_index
from modules.slackin.service import SlackinService

logger = get_module_logger()
router = APIRouter(tags=["Landing"])
limiter = get_limiter()


def select_locale(lang: Optional[str], translator: Translator) -> str:
    """Use the requested locale when it is loaded, the default otherwise."""
    if lang and lang.lower() in translator.get_available_locales():
        return lang.lower()
    return translator.default_locale


def _page(
    service: SlackinService,
    locale: str,
    outcome: Optional[InviteOutcome] = None,
    form: Optional[InviteForm] = None,
) -> str:
    counters = service.get_users_online()
    users_online = (
        service.users_online_text(counters, locale=locale) if counters else ""
    )
    return render_index(
        service.translator,
        locale,
        service.team_name,
        users_online=users_online,
        notice=outcome.message if outcome else None,
        errors=outcome.errors if outcome else (),
        form=form,
        locales=service.translator.get_available_locales(),
    )


@router.get("/", response_class=HTMLResponse)
def landing_page(
    service: SlackinServiceDep,
    translator: TranslatorDep,
    lang: Optional[str] = None,
):
    """
    Invitation page.

    Returns:
        HTMLResponse: Page with the users online sentence and the invite form.
    """
    locale = select_locale(lang, translator)
    return HTMLResponse(content=_page(service, locale))


@router.post("/invite", response_class=HTMLResponse)
@limiter.limit(invite_rate_limit)
def post_invite(
    request: Request,  # pylint: disable=unused-argument
    service: SlackinServiceDep,
    translator: TranslatorDep,
    username: str = Form(""),
    email: str = Form(""),
    lang: Optional[str] = None,
):
    """
    Accept an invite submission.

    Returns:
        HTMLResponse: The page with a confirmation (200), validation errors
        (422) or a generic failure message when Slack refused (502). Over the
        rate limit the page is rendered by invite_rate_limited_page (429).
    """
    locale = select_locale(lang, translator)
    form = InviteForm(username=username, email=email)
    outcome = service.invite(form, locale=locale)

    if outcome.sent:
        status_code = 200
        form = None
    elif outcome.reason is None:
        status_code = 422
    else:
        logger.warning("invite_not_sent", reason=outcome.reason)
        status_code = 502

    return HTMLResponse(
        content=_page(service, locale, outcome=outcome, form=form),
        status_code=status_code,
    )


def invite_rate_limited_page(request: Request) -> HTMLResponse:
    """Invitation page with the generic failure message, for throttled submissions."""
    overrides = request.app.dependency_overrides
    service = overrides.get(get_slackin_service, get_slackin_service)()
    translator = overrides.get(get_translator, get_translator)()
    locale = select_locale(request.query_params.get("lang"), translator)
    logger.warning("invite_not_sent", reason="rate_limited")
    outcome = InviteOutcome(
        sent=False,
        errors=[translator.get("validation.wrong", locale=locale)],
        reason="rate_limited",
    )
    return HTMLResponse(content=_page(service, locale, outcome=outcome), status_code=429)


register_html_fallback("/invite", invite_rate_limited_page)
