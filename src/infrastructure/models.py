"""
Document mapping for the ``locations`` collection.

Document shape
--------------
``{"uid": Int64, "timestamp": datetime (UTC), "lat": float, "lng": float}``

API keys are unsigned 64-bit but BSON integers are signed, so ``uid`` holds
the key's two's-complement ``Int64``; keys above ``2**63 - 1`` are stored
as negative numbers and mapped back on read.

Coordinates are stored as doubles and read back as Python floats without
any narrowing, so storage and distance computation share one precision.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from bson.int64 import Int64

from src.domain.entities import Location, LocationRecord

_U64 = 2**64
_I64_MAX = 2**63 - 1


def encode_uid(user_id: int) -> Int64:
    return Int64(user_id - _U64 if user_id > _I64_MAX else user_id)


def decode_uid(value: int) -> int:
    return int(value) % _U64


def to_document(record: LocationRecord) -> dict[str, Any]:
    return {
        "uid": encode_uid(record.user_id),
        "timestamp": record.timestamp,
        "lat": record.location.latitude,
        "lng": record.location.longitude,
    }


def from_document(doc: Mapping[str, Any]) -> LocationRecord:
    timestamp: datetime = doc["timestamp"]
    if timestamp.tzinfo is None:
        # BSON dates are UTC; a client without tz_aware hands back naive values
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return LocationRecord(
        user_id=decode_uid(doc["uid"]),
        timestamp=timestamp,
        location=Location(latitude=float(doc["lat"]), longitude=float(doc["lng"])),
    )
