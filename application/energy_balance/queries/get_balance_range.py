"""GetBalanceRangeQuery - read stored daily balances over a date range."""

from dataclasses import dataclass
from datetime import date
from typing import List

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)

from ..orchestrators.summary_controller import SummaryController


@dataclass(frozen=True)
class GetBalanceRangeQuery:
    """Query to retrieve balances with date in ``[start, end]``.

    Attributes:
        user_id: User identifier
        start: First date (inclusive)
        end: Last date (inclusive)
    """

    user_id: str
    start: date
    end: date


class GetBalanceRangeQueryHandler:
    """Handler for GetBalanceRangeQuery."""

    def __init__(self, controller: SummaryController):
        self._controller = controller

    async def handle(self, query: GetBalanceRangeQuery) -> List[DailyEnergyBalance]:
        """
        Handle range query.

        Returns:
            Stored rows ascending by date; missing dates are omitted

        Raises:
            InvalidInputError: If start is after end
        """
        return await self._controller.fetch_range(query.user_id, query.start, query.end)
