"""Unit tests for the update / query handlers."""

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.distance import distance_km
from src.domain.entities import Location, LocationRecord, UserIdentity
from src.domain.enums import QueryStatus, UpdateStatus
from src.domain.errors import StoreError
from src.domain.tracking import query_location, update_location
from tests.conftest import InMemoryLocationGateway

USER = UserIdentity(id=111)
T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class _FailingReadGateway(InMemoryLocationGateway):
    async def latest(self, user_id):
        self.calls.append("latest")
        raise StoreError("find failed")


class _FailingWriteGateway(InMemoryLocationGateway):
    async def insert(self, user_id, location):
        self.calls.append("insert")
        raise StoreError("insert failed")


class TestUpdateLocation:
    @pytest.mark.asyncio
    async def test_first_fix_is_initial(self, gateway):
        result = await update_location(gateway, USER, Location(40.0, -73.0))

        assert result.status == UpdateStatus.INITIAL
        assert result.km is None
        trail = gateway.trail(USER.id)
        assert len(trail) == 1
        assert trail[0].location == Location(40.0, -73.0)

    @pytest.mark.asyncio
    async def test_second_fix_reports_distance(self, gateway):
        prev = Location(40.0, -73.0)
        new = Location(40.1, -73.0)
        await update_location(gateway, USER, prev)
        result = await update_location(gateway, USER, new)

        assert result.status == UpdateStatus.DIST_TRAVELED
        assert result.km == pytest.approx(distance_km(prev, new))
        assert len(gateway.trail(USER.id)) == 2

    @pytest.mark.asyncio
    async def test_distance_measured_from_latest_not_oldest(self, gateway):
        gateway.seed(
            LocationRecord(USER.id, T0, Location(0.0, 0.0)),
            LocationRecord(USER.id, T0 + timedelta(hours=1), Location(40.0, -73.0)),
        )
        result = await update_location(gateway, USER, Location(40.0, -73.0))
        assert result.km == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.asyncio
    async def test_read_happens_before_write(self, gateway):
        await update_location(gateway, USER, Location(1.0, 1.0))
        assert gateway.calls == ["latest", "insert"]

    @pytest.mark.asyncio
    async def test_other_users_history_is_ignored(self, gateway):
        await update_location(gateway, UserIdentity(id=222), Location(1.0, 1.0))
        result = await update_location(gateway, USER, Location(2.0, 2.0))
        assert result.status == UpdateStatus.INITIAL

    @pytest.mark.asyncio
    async def test_failed_read_writes_nothing(self):
        gateway = _FailingReadGateway()
        with pytest.raises(StoreError):
            await update_location(gateway, USER, Location(1.0, 1.0))
        assert gateway.calls == ["latest"]
        assert gateway.records == []

    @pytest.mark.asyncio
    async def test_failed_write_propagates(self):
        gateway = _FailingWriteGateway()
        with pytest.raises(StoreError):
            await update_location(gateway, USER, Location(1.0, 1.0))

    @pytest.mark.asyncio
    async def test_custom_distance_function(self, gateway):
        await update_location(gateway, USER, Location(1.0, 1.0))
        result = await update_location(
            gateway, USER, Location(2.0, 2.0), distance=lambda a, b: 42.0
        )
        assert result.km == 42.0


class TestQueryLocation:
    @pytest.mark.asyncio
    async def test_no_history_is_missing(self, gateway):
        result = await query_location(gateway, USER)
        assert result.status == QueryStatus.MISSING
        assert result.record is None

    @pytest.mark.asyncio
    async def test_returns_max_timestamp_regardless_of_insert_order(self, gateway):
        newest = LocationRecord(USER.id, T0 + timedelta(minutes=5), Location(3.0, 3.0))
        gateway.seed(
            LocationRecord(USER.id, T0 + timedelta(minutes=1), Location(1.0, 1.0)),
            newest,
            LocationRecord(USER.id, T0, Location(2.0, 2.0)),
        )
        result = await query_location(gateway, USER)
        assert result.status == QueryStatus.LOCATION
        assert result.record == newest

    @pytest.mark.asyncio
    async def test_query_does_not_write(self, gateway):
        await query_location(gateway, USER)
        assert gateway.calls == ["latest"]
