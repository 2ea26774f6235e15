"""GetDailyBalanceQuery - read one stored daily balance."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)

from ..orchestrators.summary_controller import SummaryController


@dataclass(frozen=True)
class GetDailyBalanceQuery:
    """Query to retrieve the balance of one user on one date."""

    user_id: str
    date: date


class GetDailyBalanceQueryHandler:
    """Handler for GetDailyBalanceQuery.

    Pure read: a date that was never computed returns None, not zeros.
    """

    def __init__(self, controller: SummaryController):
        self._controller = controller

    async def handle(self, query: GetDailyBalanceQuery) -> Optional[DailyEnergyBalance]:
        return await self._controller.fetch(query.user_id, query.date)
