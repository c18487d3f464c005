"""Redis async client backed by its own connection pool."""

import redis.asyncio as aioredis

from src.config import Settings


def create_redis(settings: Settings) -> aioredis.Redis:
    """Return a Redis client; call ``aclose()`` on shutdown."""
    pool = aioredis.ConnectionPool.from_url(settings.redis_url, decode_responses=True)
    return aioredis.Redis(connection_pool=pool)
