"""
Update / query handlers
=======================

Update
------
1. Read the user's latest record (may be absent).
2. Append the new fix; the gateway stamps it with the server clock.
3. Report ``Initial`` for a first fix, otherwise the geodesic distance
   from the record read in step 1.

Step 1 always completes before step 2 starts, so the distance is measured
from the fix preceding this update and never from the one just written.
Any ``StoreError`` propagates and nothing is reported as a success.

Query
-----
Latest record or ``Missing``; absence of history is not an error.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .distance import distance_km
from .entities import (
    Location,
    LocationRecord,
    QueryResult,
    UpdateResult,
    UserIdentity,
)

logger = logging.getLogger(__name__)


class LocationGateway(Protocol):
    async def insert(self, user_id: int, location: Location) -> LocationRecord: ...

    async def latest(self, user_id: int) -> Optional[LocationRecord]: ...


async def update_location(
    gateway: LocationGateway,
    user: UserIdentity,
    location: Location,
    distance: Callable[[Location, Location], float] = distance_km,
) -> UpdateResult:
    previous = await gateway.latest(user.id)
    record = await gateway.insert(user.id, location)
    logger.info("Location update for user %d: %s", user.id, record.location)

    if previous is None:
        return UpdateResult.initial()
    return UpdateResult.traveled(distance(previous.location, record.location))


async def query_location(gateway: LocationGateway, user: UserIdentity) -> QueryResult:
    record = await gateway.latest(user.id)
    if record is None:
        logger.info("Location missing for user %d", user.id)
        return QueryResult.missing()
    logger.info("Last location for user %d: %s", user.id, record.location)
    return QueryResult.found(record)
