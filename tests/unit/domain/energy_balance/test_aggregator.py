"""Unit tests for EnergyBalanceAggregator."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from domain.energy_balance.aggregation import EnergyBalanceAggregator
from domain.energy_balance.core.entities import ActivityEntry, FoodLogEntry, UserProfile
from domain.energy_balance.core.exceptions.domain_errors import (
    AggregationReadError,
    UnknownUserError,
)
from domain.energy_balance.core.value_objects import BMR, TDEE
from infrastructure.persistence.in_memory import (
    InMemoryActivityLedger,
    InMemoryFoodLedger,
    InMemoryProfileStore,
)

DAY = date(2024, 1, 15)


def _profile(bmr=None, tdee=None) -> UserProfile:
    profile = UserProfile(
        user_id="user123",
        weight_kg=70,
        height_cm=175,
        age=30,
        sex="male",
        activity_level="moderately_active",
    )
    if bmr is not None:
        profile.bmr = BMR(Decimal(bmr))
        profile.tdee = None if tdee is None else TDEE(Decimal(tdee))
    return profile


def _food(calories, protein=0, carbs=0, fat=0, servings=1, when=None) -> FoodLogEntry:
    return FoodLogEntry.create(
        user_id="user123",
        food_name="food",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        consumed_at=when or datetime(2024, 1, 15, 12, 0),
        servings=servings,
    )


def _activity(calories, external_id, when=None) -> ActivityEntry:
    return ActivityEntry.create(
        user_id="user123",
        external_id=external_id,
        activity_type="Run",
        calories=calories,
        duration_s=1800,
        started_at=when or datetime(2024, 1, 15, 18, 0),
    )


@pytest.fixture
def stores():
    return InMemoryProfileStore(), InMemoryFoodLedger(), InMemoryActivityLedger()


@pytest.fixture
def aggregator(stores) -> EnergyBalanceAggregator:
    profiles, food, activities = stores
    return EnergyBalanceAggregator(profiles, food, activities)


@pytest.mark.asyncio
async def test_full_day(stores, aggregator):
    """Profile with TDEE, one meal and one run."""
    profiles, food, activities = stores
    await profiles.save(_profile(bmr="1648.75", tdee="2555.5625"))
    await food.add(_food(500, protein=30, carbs=50, fat=20, servings=2))
    await activities.upsert_by_external_id(_activity(300, "a1"))

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_consumed == 1000
    assert draft.protein_consumed == Decimal(60)
    assert draft.carbs_consumed == Decimal(100)
    assert draft.fat_consumed == Decimal(40)
    assert draft.calories_burned_baseline == 2556
    assert draft.calories_burned_exercise == 300
    assert draft.total_burned == 2856
    assert draft.net_calories == -1856


@pytest.mark.asyncio
async def test_baseline_falls_back_to_bmr(stores):
    # Stores refuse a BMR-only profile, so serve one directly
    _, food, activities = stores
    profiles = AsyncMock()
    profiles.get_profile.return_value = _profile(bmr="1648.75")
    aggregator = EnergyBalanceAggregator(profiles, food, activities)

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_burned_baseline == 1649


@pytest.mark.asyncio
async def test_custom_fallback(stores):
    profiles, food, activities = stores
    await profiles.save(UserProfile.create("user123"))
    aggregator = EnergyBalanceAggregator(profiles, food, activities, baseline_fallback_kcal=1800)

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_burned_baseline == 1800


@pytest.mark.asyncio
async def test_empty_ledgers_give_zeros(stores, aggregator):
    profiles, _, _ = stores
    await profiles.save(UserProfile.create("user123"))

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_consumed == 0
    assert draft.protein_consumed == Decimal(0)
    assert draft.calories_burned_exercise == 0
    assert draft.net_calories == -2000


@pytest.mark.asyncio
async def test_only_the_requested_day_counts(stores, aggregator):
    profiles, food, activities = stores
    await profiles.save(UserProfile.create("user123"))
    await food.add(_food(400, when=datetime(2024, 1, 15, 23, 59, 59)))
    await food.add(_food(700, when=datetime(2024, 1, 16, 0, 0)))
    await activities.upsert_by_external_id(_activity(250, "late", datetime(2024, 1, 14, 23, 0)))

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_consumed == 400
    assert draft.calories_burned_exercise == 0


@pytest.mark.asyncio
async def test_fractional_calories_round_half_up(stores, aggregator):
    profiles, food, _ = stores
    await profiles.save(UserProfile.create("user123"))
    await food.add(_food(101, servings="0.5"))  # 50.5

    draft = await aggregator.aggregate("user123", DAY)

    assert draft.calories_consumed == 51


@pytest.mark.asyncio
async def test_idempotent(stores, aggregator):
    profiles, food, _ = stores
    await profiles.save(_profile(bmr="1648.75", tdee="2555.5625"))
    await food.add(_food(250, protein="12.3"))

    first = await aggregator.aggregate("user123", DAY)
    second = await aggregator.aggregate("user123", DAY)

    assert first == second


@pytest.mark.asyncio
async def test_unknown_user(aggregator):
    with pytest.raises(UnknownUserError):
        await aggregator.aggregate("ghost", DAY)


@pytest.mark.asyncio
async def test_ledger_failure_becomes_read_error(stores):
    profiles, _, activities = stores
    await profiles.save(UserProfile.create("user123"))
    food = AsyncMock()
    food.list_for_date.side_effect = ConnectionError("db down")
    aggregator = EnergyBalanceAggregator(profiles, food, activities)

    with pytest.raises(AggregationReadError) as exc_info:
        await aggregator.aggregate("user123", DAY)

    assert exc_info.value.source == "food_log"
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_profile_failure_becomes_read_error(stores):
    _, food, activities = stores
    profiles = AsyncMock()
    profiles.get_profile.side_effect = TimeoutError()
    aggregator = EnergyBalanceAggregator(profiles, food, activities)

    with pytest.raises(AggregationReadError) as exc_info:
        await aggregator.aggregate("user123", DAY)

    assert exc_info.value.source == "profile"
