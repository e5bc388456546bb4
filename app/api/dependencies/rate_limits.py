from typing import Callable, Dict

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from infrastructure.services.providers import get_settings

limiter = Limiter(
    key_func=get_remote_address,
)

# Paths whose rate limit response is a rendered page instead of JSON.
_html_fallbacks: Dict[str, Callable[[Request], Response]] = {}


def register_html_fallback(path: str, renderer: Callable[[Request], Response]):
    """Render the 429 response for a path with the given page renderer."""
    _html_fallbacks[path] = renderer


async def rate_limit_handler(request: Request, exc: Exception):
    """Custom rate limit handler that returns a 429 status code and a custom error message.

    Paths registered with register_html_fallback get their page rendered
    instead, with the renderer running in the threadpool.
    """
    if isinstance(exc, RateLimitExceeded):
        renderer = _html_fallbacks.get(request.url.path)
        if renderer is not None:
            return await run_in_threadpool(renderer, request)
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def invite_rate_limit() -> str:
    """Per-client limit for invite submissions, read from settings."""
    return get_settings().server.INVITE_RATE_LIMIT


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
