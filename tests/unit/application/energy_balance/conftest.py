"""Shared fixtures for energy balance application tests."""

from datetime import date

import pytest
import pytest_asyncio

from application.energy_balance.orchestrators.summary_controller import (
    SummaryController,
)
from domain.energy_balance.aggregation.aggregator import EnergyBalanceAggregator
from domain.energy_balance.calculation.metabolic_calculator import MetabolicCalculator
from domain.energy_balance.core.entities.user_profile import UserProfile
from infrastructure.concurrency.keyed_lock import KeyedLock
from infrastructure.persistence.in_memory import (
    InMemoryActivityLedger,
    InMemoryCustomFoodStore,
    InMemoryCustomMealStore,
    InMemoryFoodLedger,
    InMemoryProfileStore,
    InMemorySummaryRepository,
)

TODAY = date(2024, 1, 15)


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def food_ledger() -> InMemoryFoodLedger:
    return InMemoryFoodLedger()


@pytest.fixture
def activity_ledger() -> InMemoryActivityLedger:
    return InMemoryActivityLedger()


@pytest.fixture
def summary_repository() -> InMemorySummaryRepository:
    return InMemorySummaryRepository()


@pytest.fixture
def custom_food_store() -> InMemoryCustomFoodStore:
    return InMemoryCustomFoodStore()


@pytest.fixture
def custom_meal_store() -> InMemoryCustomMealStore:
    return InMemoryCustomMealStore()


@pytest.fixture
def calculator() -> MetabolicCalculator:
    return MetabolicCalculator()


@pytest.fixture
def controller(
    profile_store, food_ledger, activity_ledger, summary_repository
) -> SummaryController:
    aggregator = EnergyBalanceAggregator(profile_store, food_ledger, activity_ledger)
    return SummaryController(
        aggregator,
        summary_repository,
        key_lock=KeyedLock(),
        clock=lambda: TODAY,
        profile_window_days=3,
    )


@pytest_asyncio.fixture
async def complete_profile(profile_store, calculator) -> UserProfile:
    """Stored profile: 70 kg, 175 cm, 30 y, male, moderately active."""
    profile = UserProfile(
        user_id="user123",
        weight_kg=70,
        height_cm=175,
        age=30,
        sex="male",
        activity_level="moderately_active",
    )
    metrics = calculator.compute_metrics(profile)
    profile.apply_metrics(metrics.bmr, metrics.tdee)
    await profile_store.save(profile)
    return profile
