"""Unit tests for energy balance read queries."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from application.energy_balance.commands.log_activity import (
    LogActivityCommand,
    LogActivityHandler,
)
from application.energy_balance.commands.log_food import LogFoodCommand, LogFoodHandler
from application.energy_balance.queries.get_balance_range import (
    GetBalanceRangeQuery,
    GetBalanceRangeQueryHandler,
)
from application.energy_balance.queries.get_balance_statistics import (
    GetBalanceStatisticsQuery,
    GetBalanceStatisticsQueryHandler,
)
from application.energy_balance.queries.get_daily_balance import (
    GetDailyBalanceQuery,
    GetDailyBalanceQueryHandler,
)
from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError

D1 = date(2024, 1, 13)
D3 = date(2024, 1, 15)


async def _log_food(food_ledger, profile_store, controller, day, calories, protein="0"):
    await LogFoodHandler(food_ledger, profile_store, controller).handle(
        LogFoodCommand(
            user_id="user123",
            food_name="Meal",
            calories=calories,
            protein=Decimal(protein),
            carbs=Decimal(0),
            fat=Decimal(0),
            consumed_at=datetime.combine(day, datetime.min.time()).replace(hour=12),
        )
    )


class TestGetDailyBalance:
    @pytest.mark.asyncio
    async def test_absent_then_present(
        self, controller, complete_profile, food_ledger, profile_store
    ):
        handler = GetDailyBalanceQueryHandler(controller)
        query = GetDailyBalanceQuery(user_id="user123", date=D3)

        assert await handler.handle(query) is None

        await _log_food(food_ledger, profile_store, controller, D3, 800)
        row = await handler.handle(query)

        assert row.calories_consumed == 800

    @pytest.mark.asyncio
    async def test_reads_never_recompute(
        self, controller, complete_profile, food_ledger, profile_store
    ):
        await _log_food(food_ledger, profile_store, controller, D3, 800)
        # Ledger changes behind the controller's back
        await food_ledger.delete((await food_ledger.list_for_date("user123", D3))[0].entry_id)

        row = await GetDailyBalanceQueryHandler(controller).handle(
            GetDailyBalanceQuery(user_id="user123", date=D3)
        )

        assert row.calories_consumed == 800


class TestGetBalanceRange:
    @pytest.mark.asyncio
    async def test_range_skips_gaps(
        self, controller, complete_profile, food_ledger, profile_store
    ):
        await _log_food(food_ledger, profile_store, controller, D3, 500)
        await _log_food(food_ledger, profile_store, controller, D1, 900)

        rows = await GetBalanceRangeQueryHandler(controller).handle(
            GetBalanceRangeQuery(user_id="user123", start=D1, end=D3)
        )

        assert [r.date for r in rows] == [D1, D3]

    @pytest.mark.asyncio
    async def test_start_after_end(self, controller):
        with pytest.raises(InvalidInputError):
            await GetBalanceRangeQueryHandler(controller).handle(
                GetBalanceRangeQuery(user_id="user123", start=D3, end=D1)
            )


class TestGetBalanceStatistics:
    @pytest.mark.asyncio
    async def test_averages_over_recorded_days(
        self, controller, complete_profile, food_ledger, profile_store, activity_ledger
    ):
        await _log_food(food_ledger, profile_store, controller, D1, 1000, protein="50.5")
        await _log_food(food_ledger, profile_store, controller, D3, 2001, protein="80")
        await LogActivityHandler(activity_ledger, profile_store, controller).handle(
            LogActivityCommand(
                user_id="user123",
                activity_type="Run",
                duration_s=2700,
                started_at=datetime(2024, 1, 15, 7, 0),
                calories=400,
            )
        )
        handler = GetBalanceStatisticsQueryHandler(controller, activity_ledger)

        stats = await handler.handle(
            GetBalanceStatisticsQuery(user_id="user123", start=D1, end=D3)
        )

        assert stats.days_recorded == 2
        assert stats.avg_calories_consumed == Decimal("1500.50")
        assert stats.avg_protein == Decimal("65.25")
        # burned: 2556 and 2956
        assert stats.avg_calories_burned == Decimal("2756.00")
        assert stats.avg_net_calories == Decimal("-1255.50")
        assert stats.total_exercise_minutes == 45

    @pytest.mark.asyncio
    async def test_empty_period(self, controller, activity_ledger):
        stats = await GetBalanceStatisticsQueryHandler(controller, activity_ledger).handle(
            GetBalanceStatisticsQuery(
                user_id="user123", start=D1, end=D1 + timedelta(days=6)
            )
        )

        assert stats.days_recorded == 0
        assert stats.avg_calories_consumed == Decimal(0)
        assert stats.total_exercise_minutes == 0
