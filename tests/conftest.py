"""
Shared test fixtures.

The MongoDB gateway is replaced by an in-memory implementation so tests run
without a database or Redis.  Its clock advances one second per insert,
which keeps "latest" unambiguous even for inserts made in the same
millisecond.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.domain.entities import Location, LocationRecord


# ── In-memory store ───────────────────────────────────────────────────


class InMemoryLocationGateway:
    """Mirrors ``LocationRepository`` over a plain list."""

    def __init__(self, start: Optional[datetime] = None):
        self.records: list[LocationRecord] = []
        self.calls: list[str] = []
        self._clock = start or datetime(2026, 1, 1, tzinfo=timezone.utc)

    async def insert(self, user_id: int, location: Location) -> LocationRecord:
        self.calls.append("insert")
        self._clock += timedelta(seconds=1)
        record = LocationRecord(user_id=user_id, timestamp=self._clock, location=location)
        self.records.append(record)
        return record

    async def latest(self, user_id: int) -> Optional[LocationRecord]:
        self.calls.append("latest")
        trail = self.trail(user_id)
        return max(trail, key=lambda r: r.timestamp, default=None)

    def seed(self, *records: LocationRecord) -> None:
        self.records.extend(records)

    def trail(self, user_id: int) -> list[LocationRecord]:
        return [r for r in self.records if r.user_id == user_id]


# ── Fixtures ──────────────────────────────────────────────────────────

TEST_API_KEYS = [111, 222]


@pytest.fixture
def gateway() -> InMemoryLocationGateway:
    return InMemoryLocationGateway()


@pytest.fixture
def app(gateway: InMemoryLocationGateway):
    """App wired to the in-memory gateway and a static key registry."""
    from src.api.app import create_app
    from src.api.dependencies import get_credential_registry, get_location_gateway
    from src.api.middleware import limiter
    from src.config import Settings
    from src.domain.credentials import StaticCredentialRegistry

    limiter.reset()
    app = create_app(Settings(_env_file=None, api_keys=TEST_API_KEYS))
    registry = StaticCredentialRegistry(TEST_API_KEYS)
    app.dependency_overrides[get_location_gateway] = lambda: gateway
    app.dependency_overrides[get_credential_registry] = lambda: registry
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
