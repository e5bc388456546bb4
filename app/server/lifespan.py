from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from core.logging import configure_logging
from infrastructure.services import get_settings, get_translator

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    # Nested sections hold tokens, only their keys are logged
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(log_level=settings.LOG_LEVEL)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    # Catalogs load once per process
    translator = get_translator()
    logger.info(
        "translations_loaded",
        locales=translator.get_available_locales(),
        default_locale=translator.default_locale,
    )

    if not settings.slack.SLACK_TOKEN:
        logger.warning("slack_token_missing", impact="invites_and_counters_disabled")

    yield

    logger.info("application_shutdown")
