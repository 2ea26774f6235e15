"""Log from saved foods and meals.

A saved meal is expanded into one food log entry per component, all on
the same day, so the ledger stays the single source of a day's intake.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.exceptions.domain_errors import (
    CustomFoodNotFoundError,
    InvalidInputError,
    UnknownUserError,
)
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.decimals import Number, as_decimal
from domain.energy_balance.core.value_objects.meal_type import MealType

from ..orchestrators.summary_controller import SummaryController
from .log_food import LogFoodResult
from .meal_components import load_meal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogCustomFoodCommand:
    """Command to log servings of a saved food."""

    user_id: str
    food_id: UUID
    consumed_at: datetime
    servings: Number = 1
    meal_type: Optional[Union[MealType, str]] = None


class LogCustomFoodHandler:
    """Handler for LogCustomFoodCommand.

    The entry copies the food's current values; later edits to the food
    do not change it.
    """

    def __init__(
        self,
        food_ledger: IFoodLedger,
        food_store: ICustomFoodStore,
        profile_store: IProfileStore,
        controller: SummaryController,
    ):
        self._food = food_ledger
        self._foods = food_store
        self._profiles = profile_store
        self._controller = controller

    async def handle(self, command: LogCustomFoodCommand) -> LogFoodResult:
        """
        Raises:
            UnknownUserError: If the user has no profile
            CustomFoodNotFoundError: If the food is unknown or not the user's
            InvalidInputError: If any value is out of range
        """
        if not await self._profiles.exists(command.user_id):
            raise UnknownUserError(command.user_id)
        food = await self._foods.get(command.food_id)
        if food is None or food.user_id != command.user_id:
            raise CustomFoodNotFoundError(str(command.food_id))

        entry = FoodLogEntry.create(
            user_id=command.user_id,
            food_name=food.name,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            consumed_at=command.consumed_at,
            servings=command.servings,
            meal_type=command.meal_type,
            brand_name=food.brand,
            fiber=food.fiber,
            sugar=food.sugar,
            sodium=food.sodium,
            custom_food_id=food.food_id,
        )
        await self._food.add(entry)

        logger.info(
            "Saved food logged",
            extra={
                "user_id": entry.user_id,
                "entry_id": str(entry.entry_id),
                "food_id": str(food.food_id),
                "date": entry.log_date.isoformat(),
            },
        )

        balance = await self._controller.recompute_for_food_change(
            entry.user_id, entry.log_date
        )
        return LogFoodResult(entry=entry, balance=balance)


@dataclass(frozen=True)
class LogMealCommand:
    """Command to log a saved meal.

    Attributes:
        servings: Meal multiplier; each component is logged with
            ``quantity × servings`` servings
    """

    user_id: str
    meal_id: UUID
    consumed_at: datetime
    servings: Number = 1
    meal_type: Optional[Union[MealType, str]] = None


@dataclass(frozen=True)
class LogMealResult:
    """Entries created from the meal and the refreshed balance of their day."""

    entries: List[FoodLogEntry]
    balance: DailyEnergyBalance


class LogMealHandler:
    """Handler for LogMealCommand.

    1. Check the user has a profile and owns the meal
    2. Build one entry per component (all validated before any write)
    3. Store the entries
    4. Recompute the day once
    """

    def __init__(
        self,
        food_ledger: IFoodLedger,
        meal_store: ICustomMealStore,
        profile_store: IProfileStore,
        controller: SummaryController,
    ):
        self._food = food_ledger
        self._meals = meal_store
        self._profiles = profile_store
        self._controller = controller

    async def handle(self, command: LogMealCommand) -> LogMealResult:
        """
        Raises:
            UnknownUserError: If the user has no profile
            CustomMealNotFoundError: If the meal is unknown or not the user's
            InvalidInputError: If the meal is empty or a value is out of range
        """
        if not await self._profiles.exists(command.user_id):
            raise UnknownUserError(command.user_id)
        meal = await load_meal(self._meals, command.meal_id, command.user_id)
        if not meal.components:
            raise InvalidInputError(f"Meal {meal.meal_id} has no components to log")

        servings = as_decimal(command.servings, "servings")
        if servings <= 0:
            raise InvalidInputError(f"servings must be positive, got {servings}")

        entries = [
            FoodLogEntry.create(
                user_id=command.user_id,
                food_name=component.food_name,
                calories=component.calories,
                protein=component.protein,
                carbs=component.carbs,
                fat=component.fat,
                consumed_at=command.consumed_at,
                servings=component.quantity * servings,
                meal_type=command.meal_type,
                brand_name=component.brand_name,
                usda_fdc_id=component.usda_fdc_id,
                custom_food_id=component.custom_food_id,
                custom_meal_id=meal.meal_id,
            )
            for component in meal.components
        ]
        day = entries[0].log_date

        added = 0
        try:
            for entry in entries:
                await self._food.add(entry)
                added += 1
        except Exception as e:
            logger.error(
                "Meal logging interrupted",
                extra={
                    "user_id": command.user_id,
                    "meal_id": str(meal.meal_id),
                    "stored": added,
                    "error": str(e),
                },
            )
            if added:
                await self._controller.recompute_for_food_change(command.user_id, day)
            raise

        logger.info(
            "Saved meal logged",
            extra={
                "user_id": command.user_id,
                "meal_id": str(meal.meal_id),
                "entries": len(entries),
                "date": day.isoformat(),
            },
        )

        balance = await self._controller.recompute_for_food_change(command.user_id, day)
        return LogMealResult(entries=entries, balance=balance)
