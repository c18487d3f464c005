"""
Seed script -- registers API keys and optionally a sample trail.

    python seed.py 111 222            # register keys in the Redis registry
    python seed.py 111 --trail 111    # ...and give user 111 a short history

Uses the same settings as the API (``MONGO_URL``, ``REDIS_URL``, ...).
"""

import argparse
import asyncio

from src.config import settings
from src.domain.entities import Location
from src.infrastructure.credentials import RedisCredentialRegistry
from src.infrastructure.database import create_client, ensure_indexes, get_locations
from src.infrastructure.redis_client import create_redis
from src.infrastructure.repositories import LocationRepository

# Short walk north along a meridian near New York (about 1.1 km per step)
SAMPLE_TRAIL = [
    Location(latitude=40.700, longitude=-73.990),
    Location(latitude=40.710, longitude=-73.990),
    Location(latitude=40.720, longitude=-73.990),
    Location(latitude=40.730, longitude=-73.990),
]


async def seed(keys: list[int], trail_users: list[int]) -> None:
    redis = create_redis(settings)
    try:
        registry = RedisCredentialRegistry(redis, settings.api_keys_redis_key)
        added = await registry.register(*keys)
        print(f"  Registered {added} new API key(s) in {settings.api_keys_redis_key}")
    finally:
        await redis.aclose()

    if not trail_users:
        return

    client = create_client(settings)
    try:
        collection = get_locations(client, settings)
        await ensure_indexes(collection)
        repo = LocationRepository(collection)
        for user_id in trail_users:
            if await repo.latest(user_id) is not None:
                print(f"  User {user_id} already has history. Skipping.")
                continue
            for point in SAMPLE_TRAIL:
                await repo.insert(user_id, point)
            print(f"  Created {len(SAMPLE_TRAIL)} fixes for user {user_id}")
    finally:
        client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed API keys and sample trails")
    parser.add_argument("keys", nargs="*", type=int, help="API keys to register")
    parser.add_argument("--trail", nargs="*", type=int, default=[], help="users to give a sample trail")
    args = parser.parse_args()

    print("Seeding...")
    asyncio.run(seed(args.keys, args.trail))
    print("\nSeed complete!")


if __name__ == "__main__":
    main()
