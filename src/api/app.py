"""
FastAPI application factory.

* Registers routes for runs, geocoding and admin.
* Releases Redis / DB connections via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, geocode, runs
from src.config import settings
from src.infrastructure import redis_client
from src.infrastructure.database import dispose_engine

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close pooled connections on shutdown."""
    logger.info("Group run finder API starting")
    yield
    await redis_client.close_redis()
    await dispose_engine()
    logger.info("Group run finder API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Group Run Finder API",
        description=(
            "Find community group runs near you that match your pace, "
            "and publish or edit your own run listings."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(runs.router, prefix="/api/v1")
    app.include_router(geocode.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
