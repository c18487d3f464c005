"""
FastAPI application factory.

* Registers routes for locations and admin.
* Opens / closes the MongoDB and Redis connection pools via lifespan
  events and publishes them on ``app.state``.
* Maps credential failures to 400 and store failures to 500.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import configure_rate_limit, limiter
from src.api.routes import admin, locations
from src.config import Settings, settings as default_settings
from src.domain.credentials import StaticCredentialRegistry
from src.domain.errors import CredentialError, StoreError
from src.infrastructure.credentials import RedisCredentialRegistry
from src.infrastructure.database import (
    create_client,
    ensure_indexes,
    get_database,
    get_locations,
)
from src.infrastructure.redis_client import create_redis

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store connection pools on startup; close them on shutdown."""
    settings: Settings = app.state.settings

    client = create_client(settings)
    app.state.database = get_database(client, settings)
    app.state.locations = get_locations(client, settings)
    try:
        await ensure_indexes(app.state.locations)
    except PyMongoError:
        logger.warning("Could not ensure indexes on %s", settings.mongo_collection, exc_info=True)

    redis = None
    if settings.credential_backend == "redis":
        redis = create_redis(settings)
        app.state.credential_registry = RedisCredentialRegistry(
            redis, settings.api_keys_redis_key
        )
    else:
        app.state.credential_registry = StaticCredentialRegistry(settings.api_keys)
    logger.info(
        "Location store ready (database=%s, credentials=%s)",
        settings.mongo_database,
        settings.credential_backend,
    )

    yield

    client.close()
    if redis is not None:
        await redis.aclose()
    logger.info("Location store closed")


async def _credential_error_handler(request: Request, exc: CredentialError):
    return JSONResponse(status_code=400, content={"detail": exc.detail})


async def _store_error_handler(request: Request, exc: StoreError):
    logger.error("Store operation failed: %s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Location store unavailable"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="GPS Location Tracker API",
        description=(
            "Records GPS fixes per API key, reports the geodesic distance "
            "traveled since the previous fix, and returns the latest fix."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Error mapping
    app.add_exception_handler(CredentialError, _credential_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)

    # Rate limiter
    app.state.limiter = limiter
    configure_rate_limit(settings.rate_limit)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(locations.router)
    app.include_router(admin.router)

    return app
