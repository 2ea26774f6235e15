"""In-memory implementation of IFoodLedger for testing."""

from copy import deepcopy
from datetime import date
from typing import List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.ports.food_ledger import IFoodLedger


class InMemoryFoodLedger(IFoodLedger):
    """
    In-memory implementation of the food ledger.

    Entries are stored by entry ID and deep-copied on the way in and out.
    """

    def __init__(self) -> None:
        self._entries: dict[UUID, FoodLogEntry] = {}

    async def list_for_date(self, user_id: str, day: date) -> List[FoodLogEntry]:
        entries = [
            entry
            for entry in self._entries.values()
            if entry.user_id == user_id and entry.log_date == day
        ]
        entries.sort(key=lambda e: e.consumed_at)
        return [deepcopy(e) for e in entries]

    async def add(self, entry: FoodLogEntry) -> None:
        if entry.entry_id in self._entries:
            raise ValueError(f"Food log entry {entry.entry_id} already exists")
        self._entries[entry.entry_id] = deepcopy(entry)

    async def get(self, entry_id: UUID) -> Optional[FoodLogEntry]:
        entry = self._entries.get(entry_id)
        return deepcopy(entry) if entry else None

    async def update(self, entry: FoodLogEntry) -> None:
        if entry.entry_id not in self._entries:
            raise ValueError(f"Food log entry {entry.entry_id} does not exist")
        self._entries[entry.entry_id] = deepcopy(entry)

    async def delete(self, entry_id: UUID) -> bool:
        return self._entries.pop(entry_id, None) is not None

    def clear(self) -> None:
        """Clear all entries (for testing)."""
        self._entries.clear()

    def count(self) -> int:
        return len(self._entries)
