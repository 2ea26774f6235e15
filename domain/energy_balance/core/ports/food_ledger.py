"""IFoodLedger port - food log persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from ..entities.food_log_entry import FoodLogEntry


class IFoodLedger(ABC):
    """Port for the food log ledger."""

    @abstractmethod
    async def list_for_date(self, user_id: str, day: date) -> List[FoodLogEntry]:
        """List a user's food entries whose log date is ``day``.

        Args:
            user_id: User identifier
            day: Calendar date

        Returns:
            List[FoodLogEntry]: Entries for that date (possibly empty)
        """
        pass

    @abstractmethod
    async def add(self, entry: FoodLogEntry) -> None:
        """Insert a new entry."""
        pass

    @abstractmethod
    async def get(self, entry_id: UUID) -> Optional[FoodLogEntry]:
        """Find entry by ID.

        Returns:
            Optional[FoodLogEntry]: Entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, entry: FoodLogEntry) -> None:
        """Replace an existing entry."""
        pass

    @abstractmethod
    async def delete(self, entry_id: UUID) -> bool:
        """Delete entry by ID.

        Returns:
            bool: True if an entry was deleted
        """
        pass
