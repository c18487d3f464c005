"""
Redis-backed credential registry.

Issued API keys are members of a single Redis set; a key is active while
it is a member.  Seeding the set is done by ``seed.py``.
"""

from __future__ import annotations

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.domain.errors import StoreError


class RedisCredentialRegistry:
    def __init__(self, client: aioredis.Redis, key: str = "auth:api_keys"):
        self.redis = client
        self.key = key

    async def is_active(self, key: int) -> bool:
        try:
            return bool(await self.redis.sismember(self.key, str(key)))
        except RedisError as exc:
            raise StoreError("credential lookup failed") from exc

    async def register(self, *keys: int) -> int:
        """Add keys to the registry. Returns how many were new."""
        if not keys:
            return 0
        return await self.redis.sadd(self.key, *(str(k) for k in keys))
