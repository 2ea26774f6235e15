"""ISummaryRepository port - daily energy balance persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..entities.daily_energy_balance import DailyEnergyBalance


class ISummaryRepository(ABC):
    """Port for stored daily energy balance rows.

    At most one row per ``(user_id, date)``. Writes replace the whole row.
    """

    @abstractmethod
    async def put(self, balance: DailyEnergyBalance) -> None:
        """Insert or fully replace the row for ``(balance.user_id, balance.date)``."""
        pass

    @abstractmethod
    async def get(self, user_id: str, day: date) -> Optional[DailyEnergyBalance]:
        """Get the row for one date, None when absent."""
        pass

    @abstractmethod
    async def get_range(
        self, user_id: str, start: date, end: date
    ) -> List[DailyEnergyBalance]:
        """Get rows with date in ``[start, end]``, ascending by date.

        Dates without a row are omitted.
        """
        pass
