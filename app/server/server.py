from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from core.config import settings
from core.logging import get_module_logger
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)


# The badge is embedded from other sites
allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


handler.include_router(api_router)
