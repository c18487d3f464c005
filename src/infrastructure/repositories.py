"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

``LocationRepository`` is the MongoDB-backed location store gateway.  Every
driver failure is re-raised as ``StoreError`` so the HTTP layer can answer
with a server error instead of leaking driver exceptions.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from .models import encode_uid, from_document, to_document
from src.domain.entities import Location, LocationRecord
from src.domain.errors import StoreError


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond resolution BSON keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class LocationRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, user_id: int, location: Location) -> LocationRecord:
        """Append a fix stamped with the server clock."""
        record = LocationRecord(user_id=user_id, timestamp=utc_now(), location=location)
        try:
            await self.collection.insert_one(to_document(record))
        except PyMongoError as exc:
            raise StoreError(f"insert failed for user {user_id}") from exc
        return record

    async def latest(self, user_id: int) -> Optional[LocationRecord]:
        """Most recent fix for *user_id*, or None if it has no history."""
        try:
            doc = await self.collection.find_one(
                {"uid": encode_uid(user_id)},
                sort=[("timestamp", DESCENDING)],
            )
        except PyMongoError as exc:
            raise StoreError(f"find failed for user {user_id}") from exc
        return from_document(doc) if doc is not None else None
