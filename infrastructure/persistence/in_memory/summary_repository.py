"""In-memory implementation of ISummaryRepository for testing."""

from datetime import date
from typing import List, Optional, Tuple

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.ports.summary_repository import ISummaryRepository


class InMemorySummaryRepository(ISummaryRepository):
    """
    In-memory store of daily energy balance rows keyed by (user_id, date).

    Rows are frozen dataclasses, so no copying is needed.
    """

    def __init__(self) -> None:
        self._rows: dict[Tuple[str, date], DailyEnergyBalance] = {}

    async def put(self, balance: DailyEnergyBalance) -> None:
        self._rows[balance.key] = balance

    async def get(self, user_id: str, day: date) -> Optional[DailyEnergyBalance]:
        return self._rows.get((user_id, day))

    async def get_range(
        self, user_id: str, start: date, end: date
    ) -> List[DailyEnergyBalance]:
        rows = [
            row
            for (owner, day), row in self._rows.items()
            if owner == user_id and start <= day <= end
        ]
        return sorted(rows, key=lambda r: r.date)

    def clear(self) -> None:
        """Clear all rows (for testing)."""
        self._rows.clear()

    def count(self) -> int:
        return len(self._rows)
