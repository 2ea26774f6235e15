"""GetBalanceStatisticsQuery - averages over a period of stored balances."""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from domain.energy_balance.core.ports.activity_ledger import IActivityLedger

from ..orchestrators.summary_controller import SummaryController

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class GetBalanceStatisticsQuery:
    """Query for period statistics (typically one week)."""

    user_id: str
    start: date
    end: date


@dataclass(frozen=True)
class BalanceStatistics:
    """Averages over the stored daily balances of a period.

    Days without a stored row are not counted as zero days: averages are
    taken over ``days_recorded`` rows only. Averages are rounded to two
    decimals.
    """

    start: date
    end: date
    days_recorded: int
    avg_calories_consumed: Decimal
    avg_protein: Decimal
    avg_carbs: Decimal
    avg_fat: Decimal
    avg_calories_burned: Decimal
    avg_net_calories: Decimal
    total_exercise_minutes: int


class GetBalanceStatisticsQueryHandler:
    """Handler for GetBalanceStatisticsQuery."""

    def __init__(self, controller: SummaryController, activity_ledger: IActivityLedger):
        self._controller = controller
        self._activities = activity_ledger

    async def handle(self, query: GetBalanceStatisticsQuery) -> BalanceStatistics:
        """
        Handle statistics query.

        Raises:
            InvalidInputError: If start is after end
        """
        rows = await self._controller.fetch_range(query.user_id, query.start, query.end)
        activities = await self._activities.list_for_range(
            query.user_id, query.start, query.end
        )
        count = len(rows)

        def average(values: Iterable) -> Decimal:
            if count == 0:
                return Decimal(0)
            total = sum(values, Decimal(0))
            return (total / count).quantize(_CENT, rounding=ROUND_HALF_UP)

        return BalanceStatistics(
            start=query.start,
            end=query.end,
            days_recorded=count,
            avg_calories_consumed=average(r.calories_consumed for r in rows),
            avg_protein=average(r.protein_consumed for r in rows),
            avg_carbs=average(r.carbs_consumed for r in rows),
            avg_fat=average(r.fat_consumed for r in rows),
            avg_calories_burned=average(r.total_burned for r in rows),
            avg_net_calories=average(r.net_calories for r in rows),
            total_exercise_minutes=sum(a.duration_s for a in activities) // 60,
        )
