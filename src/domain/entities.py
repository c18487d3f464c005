"""
Domain entities and value objects.

* ``LocationRecord`` is append-only: it is created once by the store
  gateway and never mutated afterwards (``frozen=True``).
* ``UpdateResult`` / ``QueryResult`` carry the two-way outcome of each
  handler (first fix vs. subsequent fix, found vs. missing).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .enums import QueryStatus, UpdateStatus


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class UserIdentity:
    id: int


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LocationRecord:
    user_id: int
    timestamp: datetime
    location: Location


# ── Handler outcomes ──────────────────────────────────────────────────


@dataclass(frozen=True)
class UpdateResult:
    status: UpdateStatus
    km: Optional[float] = None

    @classmethod
    def initial(cls) -> UpdateResult:
        return cls(status=UpdateStatus.INITIAL)

    @classmethod
    def traveled(cls, km: float) -> UpdateResult:
        return cls(status=UpdateStatus.DIST_TRAVELED, km=km)


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus
    record: Optional[LocationRecord] = None

    @classmethod
    def missing(cls) -> QueryResult:
        return cls(status=QueryStatus.MISSING)

    @classmethod
    def found(cls, record: LocationRecord) -> QueryResult:
        return cls(status=QueryStatus.LOCATION, record=record)
