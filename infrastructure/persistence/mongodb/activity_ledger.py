"""MongoDB implementation of IActivityLedger."""

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from domain.energy_balance.core.entities.activity_entry import ActivityEntry
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger
from domain.energy_balance.core.value_objects.activity_source import ActivitySource

from .base import MongoBaseRepository


class MongoActivityLedger(MongoBaseRepository[ActivityEntry], IActivityLedger):
    """MongoDB implementation of the activity ledger.

    The unique index on ``(user_id, external_id)`` created by
    :meth:`ensure_indexes` keeps concurrent imports from duplicating a row.
    """

    @property
    def collection_name(self) -> str:
        return "activities"

    def to_document(self, entity: ActivityEntry) -> Dict[str, Any]:
        entry = entity
        return {
            "_id": str(entry.entry_id),
            "user_id": entry.user_id,
            "external_id": entry.external_id,
            "log_date": self.date_to_iso(entry.log_date),
            "activity_type": entry.activity_type,
            "name": entry.name,
            "calories": entry.calories,
            "duration_s": entry.duration_s,
            "distance_m": self.decimal_to_str(entry.distance_m),
            "source": entry.source.value,
            "started_at": self.datetime_to_iso(entry.started_at),
            "created_at": self.datetime_to_iso(entry.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> ActivityEntry:
        return ActivityEntry(
            entry_id=UUID(doc["_id"]),
            user_id=doc["user_id"],
            external_id=doc["external_id"],
            activity_type=doc["activity_type"],
            name=doc.get("name"),
            calories=int(doc["calories"]),
            duration_s=int(doc["duration_s"]),
            distance_m=self.str_to_decimal(doc.get("distance_m")),
            source=ActivitySource(doc.get("source", ActivitySource.STRAVA.value)),
            started_at=self.iso_to_datetime(doc["started_at"]),
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
        )

    async def list_for_date(self, user_id: str, day: date) -> List[ActivityEntry]:
        docs = await self._find_many(
            {"user_id": user_id, "log_date": self.date_to_iso(day)},
            sort=[("started_at", 1)],
        )
        return [self.from_document(doc) for doc in docs]

    async def list_for_range(
        self, user_id: str, start: date, end: date
    ) -> List[ActivityEntry]:
        docs = await self._find_many(
            {
                "user_id": user_id,
                "log_date": {"$gte": self.date_to_iso(start), "$lte": self.date_to_iso(end)},
            },
            sort=[("started_at", 1)],
        )
        return [self.from_document(doc) for doc in docs]

    async def upsert_by_external_id(
        self, entry: ActivityEntry
    ) -> Tuple[ActivityEntry, Optional[date]]:
        """Insert or replace by ``(user_id, external_id)`` in one atomic call.

        A replaced document keeps its ``_id`` and ``created_at``. The
        document as it was before the write supplies the previous date.
        """
        document = self.to_document(entry)
        on_insert = {
            "_id": document.pop("_id"),
            "created_at": document.pop("created_at"),
        }
        before = await self._find_one_and_update(
            {"user_id": entry.user_id, "external_id": entry.external_id},
            {"$set": document, "$setOnInsert": on_insert},
            upsert=True,
        )
        if before is None:
            return entry, None

        stored = replace(
            entry,
            entry_id=UUID(before["_id"]),
            created_at=self.iso_to_utc_datetime(before["created_at"]),
        )
        return stored, self.iso_to_date(before["log_date"])

    async def ensure_indexes(self) -> None:
        await self._create_index(
            [("user_id", 1), ("external_id", 1)], name="idx_user_external_unique", unique=True
        )
        await self._create_index([("user_id", 1), ("log_date", 1)], name="idx_user_date")

    async def get(self, entry_id: UUID) -> Optional[ActivityEntry]:
        doc = await self._find_one({"_id": str(entry_id)})
        return self.from_document(doc) if doc else None

    async def delete(self, entry_id: UUID) -> bool:
        return await self._delete_one({"_id": str(entry_id)}) > 0
