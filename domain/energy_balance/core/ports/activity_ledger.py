"""IActivityLedger port - exercise session persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from ..entities.activity_entry import ActivityEntry


class IActivityLedger(ABC):
    """Port for the activity ledger.

    Entries are unique per ``(user_id, external_id)``.
    """

    @abstractmethod
    async def list_for_date(self, user_id: str, day: date) -> List[ActivityEntry]:
        """List a user's sessions whose log date is ``day``."""
        pass

    @abstractmethod
    async def list_for_range(
        self, user_id: str, start: date, end: date
    ) -> List[ActivityEntry]:
        """List a user's sessions with log date in ``[start, end]``."""
        pass

    @abstractmethod
    async def upsert_by_external_id(
        self, entry: ActivityEntry
    ) -> Tuple[ActivityEntry, Optional[date]]:
        """Insert an entry, or update the one with the same external ID.

        On update the stored entry keeps its ``entry_id``.

        Args:
            entry: Entry to store

        Returns:
            Tuple of the stored entry and the previous log date when an
            existing entry was updated (None on insert)
        """
        pass

    @abstractmethod
    async def get(self, entry_id: UUID) -> Optional[ActivityEntry]:
        """Find entry by ID."""
        pass

    @abstractmethod
    async def delete(self, entry_id: UUID) -> bool:
        """Delete entry by ID.

        Returns:
            bool: True if an entry was deleted
        """
        pass
