"""Status badge route.

Serves an SVG badge with the number of active and total workspace members,
suitable for embedding in READMEs and websites.
"""

from fastapi import APIRouter, Response

from core.logging import get_module_logger
from infrastructure.services import SettingsDep, SlackinServiceDep
from modules.slackin.badge import render_users_badge

logger = get_module_logger()
router = APIRouter(tags=["Badge"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/badge.svg")
def get_badge(service: SlackinServiceDep, settings: SettingsDep):
    """
    Online users badge.

    Returns:
        Response: SVG image "slack | active/total", or "slack | -" when the
        counters are not available.
    """
    counters = service.get_users_online()
    logger.debug("badge_rendered", available=counters is not None)
    return Response(
        content=render_users_badge(counters),
        media_type=SVG_MEDIA_TYPE,
        headers={
            "Cache-Control": f"max-age={settings.server.BADGE_CACHE_SECONDS}",
        },
    )
