"""Unit tests for food log commands."""

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from application.energy_balance.commands.delete_food_log import (
    DeleteFoodLogCommand,
    DeleteFoodLogHandler,
)
from application.energy_balance.commands.log_food import LogFoodCommand, LogFoodHandler
from application.energy_balance.commands.update_food_log import (
    UpdateFoodLogCommand,
    UpdateFoodLogHandler,
)
from domain.energy_balance.core.exceptions.domain_errors import (
    FoodLogNotFoundError,
    InvalidInputError,
    UnknownUserError,
)

DAY = date(2024, 1, 15)


def _command(**overrides) -> LogFoodCommand:
    values = dict(
        user_id="user123",
        food_name="Greek Yogurt",
        calories=120,
        protein=Decimal(10),
        carbs=Decimal(8),
        fat=Decimal(4),
        consumed_at=datetime(2024, 1, 15, 8, 30),
        servings=2,
        meal_type="breakfast",
    )
    values.update(overrides)
    return LogFoodCommand(**values)


class TestLogFood:
    @pytest.mark.asyncio
    async def test_log_food_refreshes_day(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        handler = LogFoodHandler(food_ledger, profile_store, controller)

        result = await handler.handle(_command())

        assert result.entry.log_date == DAY
        assert result.balance.calories_consumed == 240
        assert result.balance.protein_consumed == Decimal(20)
        assert await controller.fetch("user123", DAY) == result.balance

    @pytest.mark.asyncio
    async def test_unknown_user(self, food_ledger, profile_store, controller):
        handler = LogFoodHandler(food_ledger, profile_store, controller)

        with pytest.raises(UnknownUserError):
            await handler.handle(_command(user_id="ghost"))

        assert food_ledger.count() == 0

    @pytest.mark.asyncio
    async def test_invalid_servings(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        handler = LogFoodHandler(food_ledger, profile_store, controller)

        with pytest.raises(InvalidInputError):
            await handler.handle(_command(servings=0))

        assert await controller.fetch("user123", DAY) is None


class TestUpdateFoodLog:
    @pytest.mark.asyncio
    async def test_update_same_day(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        logged = await LogFoodHandler(food_ledger, profile_store, controller).handle(_command())
        handler = UpdateFoodLogHandler(food_ledger, controller)

        result = await handler.handle(
            UpdateFoodLogCommand(entry_id=logged.entry.entry_id, user_id="user123", servings=1)
        )

        assert [b.date for b in result.balances] == [DAY]
        assert result.balances[0].calories_consumed == 120

    @pytest.mark.asyncio
    async def test_moving_entry_recomputes_both_days(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        logged = await LogFoodHandler(food_ledger, profile_store, controller).handle(_command())
        handler = UpdateFoodLogHandler(food_ledger, controller)

        result = await handler.handle(
            UpdateFoodLogCommand(
                entry_id=logged.entry.entry_id,
                user_id="user123",
                consumed_at=datetime(2024, 1, 16, 9, 0),
            )
        )

        old_day, new_day = result.balances
        assert old_day.date == DAY
        assert old_day.calories_consumed == 0
        assert new_day.date == date(2024, 1, 16)
        assert new_day.calories_consumed == 240

    @pytest.mark.asyncio
    async def test_no_fields(self, food_ledger, controller):
        handler = UpdateFoodLogHandler(food_ledger, controller)

        with pytest.raises(InvalidInputError):
            await handler.handle(UpdateFoodLogCommand(entry_id=uuid4(), user_id="user123"))

    @pytest.mark.asyncio
    async def test_other_users_entry(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        logged = await LogFoodHandler(food_ledger, profile_store, controller).handle(_command())
        handler = UpdateFoodLogHandler(food_ledger, controller)

        with pytest.raises(FoodLogNotFoundError):
            await handler.handle(
                UpdateFoodLogCommand(entry_id=logged.entry.entry_id, user_id="intruder", calories=1)
            )

    @pytest.mark.asyncio
    async def test_invalid_value_leaves_entry(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        logged = await LogFoodHandler(food_ledger, profile_store, controller).handle(_command())
        handler = UpdateFoodLogHandler(food_ledger, controller)

        with pytest.raises(InvalidInputError):
            await handler.handle(
                UpdateFoodLogCommand(
                    entry_id=logged.entry.entry_id, user_id="user123", calories=-5
                )
            )

        assert (await food_ledger.get(logged.entry.entry_id)).calories == 120


class TestDeleteFoodLog:
    @pytest.mark.asyncio
    async def test_delete_last_entry_leaves_zero_row(
        self, food_ledger, profile_store, controller, complete_profile
    ):
        logged = await LogFoodHandler(food_ledger, profile_store, controller).handle(_command())
        handler = DeleteFoodLogHandler(food_ledger, controller)

        balance = await handler.handle(
            DeleteFoodLogCommand(entry_id=logged.entry.entry_id, user_id="user123")
        )

        assert balance.calories_consumed == 0
        assert balance.calories_burned_baseline == 2556
        assert await controller.fetch("user123", DAY) == balance

    @pytest.mark.asyncio
    async def test_delete_missing(self, food_ledger, controller):
        handler = DeleteFoodLogHandler(food_ledger, controller)

        with pytest.raises(FoodLogNotFoundError):
            await handler.handle(DeleteFoodLogCommand(entry_id=uuid4(), user_id="user123"))
