"""
Pydantic request / response schemas for the REST API.

Responses mirror an externally tagged enum: a bare string for the unit
variant (``"Initial"``, ``"Missing"``) or a single-key object naming the
variant (``{"DistTraveled": {...}}``, ``{"Location": {...}}``).
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field, RootModel

from src.domain import entities
from src.domain.enums import QueryStatus, UpdateStatus


# ── Requests ──────────────────────────────────────────────────────────


class LocationPayload(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_location(self) -> entities.Location:
        return entities.Location(latitude=self.lat, longitude=self.lng)


# ── Responses ─────────────────────────────────────────────────────────


class Kilometers(BaseModel):
    km: float


class DistTraveled(BaseModel):
    DistTraveled: Kilometers


class UpdateResponse(RootModel[Union[Literal["Initial"], DistTraveled]]):
    @classmethod
    def from_result(cls, result: entities.UpdateResult) -> UpdateResponse:
        if result.status is UpdateStatus.INITIAL or result.km is None:
            return cls("Initial")
        return cls(DistTraveled(DistTraveled=Kilometers(km=result.km)))


class TimestampLocation(BaseModel):
    timestamp: str = Field(..., description="RFC 3339, UTC")
    location: LocationPayload


class LocationFound(BaseModel):
    Location: TimestampLocation


class QueryResponse(RootModel[Union[Literal["Missing"], LocationFound]]):
    @classmethod
    def from_result(cls, result: entities.QueryResult) -> QueryResponse:
        if result.status is QueryStatus.MISSING or result.record is None:
            return cls("Missing")
        record = result.record
        return cls(
            LocationFound(
                Location=TimestampLocation(
                    timestamp=record.timestamp.isoformat(timespec="milliseconds"),
                    location=LocationPayload(
                        lat=record.location.latitude,
                        lng=record.location.longitude,
                    ),
                )
            )
        )


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
