"""LogFoodCommand - add a food entry and refresh its day."""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.exceptions.domain_errors import UnknownUserError
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.decimals import Number, as_decimal
from domain.energy_balance.core.value_objects.meal_type import MealType

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFoodCommand:
    """Command to log one food consumption.

    Attributes:
        user_id: User who ate the food
        food_name: Food name
        calories: kcal per serving
        protein: grams per serving
        carbs: grams per serving
        fat: grams per serving
        consumed_at: Consumption time in the user's reference day
        servings: Serving multiplier (default 1)
    """

    user_id: str
    food_name: str
    calories: int
    protein: Number
    carbs: Number
    fat: Number
    consumed_at: datetime
    servings: Number = 1
    meal_type: Optional[Union[MealType, str]] = None
    brand_name: Optional[str] = None
    fiber: Optional[Number] = None
    sugar: Optional[Number] = None
    sodium: Optional[Number] = None
    usda_fdc_id: Optional[str] = None


@dataclass(frozen=True)
class LogFoodResult:
    """Stored entry and the refreshed balance of its day."""

    entry: FoodLogEntry
    balance: DailyEnergyBalance


class LogFoodHandler:
    """Handler for LogFoodCommand.

    1. Check the user has a profile
    2. Validate and store the entry
    3. Recompute the entry's day
    """

    def __init__(
        self,
        food_ledger: IFoodLedger,
        profile_store: IProfileStore,
        controller: SummaryController,
    ):
        self._food = food_ledger
        self._profiles = profile_store
        self._controller = controller

    async def handle(self, command: LogFoodCommand) -> LogFoodResult:
        """
        Handle food logging command.

        Raises:
            UnknownUserError: If the user has no profile
            InvalidInputError: If any value is out of range
        """
        if not await self._profiles.exists(command.user_id):
            raise UnknownUserError(command.user_id)

        entry = FoodLogEntry.create(
            user_id=command.user_id,
            food_name=command.food_name,
            calories=command.calories,
            protein=command.protein,
            carbs=command.carbs,
            fat=command.fat,
            consumed_at=command.consumed_at,
            servings=command.servings,
            meal_type=command.meal_type,
            brand_name=command.brand_name,
            fiber=_optional_decimal(command.fiber, "fiber"),
            sugar=_optional_decimal(command.sugar, "sugar"),
            sodium=_optional_decimal(command.sodium, "sodium"),
            usda_fdc_id=command.usda_fdc_id,
        )
        await self._food.add(entry)

        logger.info(
            "Food logged",
            extra={
                "user_id": entry.user_id,
                "entry_id": str(entry.entry_id),
                "date": entry.log_date.isoformat(),
            },
        )

        balance = await self._controller.recompute_for_food_change(
            entry.user_id, entry.log_date
        )
        return LogFoodResult(entry=entry, balance=balance)


def _optional_decimal(value: Optional[Number], field_name: str) -> Optional[Decimal]:
    return None if value is None else as_decimal(value, field_name)
