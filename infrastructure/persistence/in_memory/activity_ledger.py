"""In-memory implementation of IActivityLedger for testing."""

from copy import deepcopy
from dataclasses import replace
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from domain.energy_balance.core.entities.activity_entry import ActivityEntry
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger


class InMemoryActivityLedger(IActivityLedger):
    """
    In-memory implementation of the activity ledger.

    Keeps a secondary index ``(user_id, external_id) -> entry_id`` to
    enforce the per-user uniqueness of external IDs.
    """

    def __init__(self) -> None:
        self._entries: dict[UUID, ActivityEntry] = {}
        self._by_external_id: dict[Tuple[str, str], UUID] = {}

    async def list_for_date(self, user_id: str, day: date) -> List[ActivityEntry]:
        return await self.list_for_range(user_id, day, day)

    async def list_for_range(
        self, user_id: str, start: date, end: date
    ) -> List[ActivityEntry]:
        entries = [
            entry
            for entry in self._entries.values()
            if entry.user_id == user_id and start <= entry.log_date <= end
        ]
        entries.sort(key=lambda e: e.started_at)
        return [deepcopy(e) for e in entries]

    async def upsert_by_external_id(
        self, entry: ActivityEntry
    ) -> Tuple[ActivityEntry, Optional[date]]:
        key = (entry.user_id, entry.external_id)
        existing_id = self._by_external_id.get(key)

        if existing_id is None:
            self._entries[entry.entry_id] = deepcopy(entry)
            self._by_external_id[key] = entry.entry_id
            return deepcopy(entry), None

        previous = self._entries[existing_id]
        stored = replace(
            entry, entry_id=existing_id, created_at=previous.created_at
        )
        self._entries[existing_id] = deepcopy(stored)
        return stored, previous.log_date

    async def get(self, entry_id: UUID) -> Optional[ActivityEntry]:
        entry = self._entries.get(entry_id)
        return deepcopy(entry) if entry else None

    async def delete(self, entry_id: UUID) -> bool:
        entry = self._entries.pop(entry_id, None)
        if entry is None:
            return False
        del self._by_external_id[(entry.user_id, entry.external_id)]
        return True

    def clear(self) -> None:
        """Clear all entries (for testing)."""
        self._entries.clear()
        self._by_external_id.clear()

    def count(self) -> int:
        return len(self._entries)
