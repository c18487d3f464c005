"""
Async MongoDB client factory (motor).

The client owns a connection pool and is created once per process in the
application lifespan, then shared by every request through ``app.state``.
"""

from __future__ import annotations

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from src.config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Build a pooled client; credentials are checked against ``admin``."""
    kwargs = {
        "tz_aware": True,
        "serverSelectionTimeoutMS": settings.mongo_timeout_ms,
    }
    if settings.mongo_username:
        kwargs.update(
            username=settings.mongo_username,
            password=settings.mongo_password,
            authSource="admin",
        )
    if settings.mongo_tls_insecure:
        kwargs.update(tls=True, tlsAllowInvalidCertificates=True)
    return AsyncIOMotorClient(settings.mongo_url, **kwargs)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongo_database]


def get_locations(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    return get_database(client, settings)[settings.mongo_collection]


async def ensure_indexes(collection: AsyncIOMotorCollection) -> None:
    """Compound index backing the per-user "latest fix" lookup."""
    await collection.create_index(
        [("uid", ASCENDING), ("timestamp", DESCENDING)],
        name="uid_timestamp",
    )


async def ping(database: AsyncIOMotorDatabase) -> bool:
    """Return True if the server answers ``ping``."""
    try:
        await database.command("ping")
        return True
    except PyMongoError:
        logger.warning("MongoDB ping failed", exc_info=True)
        return False
