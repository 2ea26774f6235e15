"""UpdateFoodLogCommand - edit a food entry and refresh affected days."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.exceptions.domain_errors import (
    FoodLogNotFoundError,
    InvalidInputError,
)
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.value_objects.decimals import Number, as_decimal
from domain.energy_balance.core.value_objects.meal_type import MealType

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)

_DECIMAL_FIELDS = ("protein", "carbs", "fat", "servings", "fiber", "sugar", "sodium")


@dataclass(frozen=True)
class UpdateFoodLogCommand:
    """Command to edit a food entry. None leaves a field unchanged."""

    entry_id: UUID
    user_id: str
    food_name: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[Number] = None
    carbs: Optional[Number] = None
    fat: Optional[Number] = None
    servings: Optional[Number] = None
    consumed_at: Optional[datetime] = None
    meal_type: Optional[Union[MealType, str]] = None
    brand_name: Optional[str] = None
    fiber: Optional[Number] = None
    sugar: Optional[Number] = None
    sodium: Optional[Number] = None

    def changes(self) -> Dict[str, Any]:
        """Fields to change, with numeric values as Decimal."""
        names = (
            "food_name",
            "calories",
            "consumed_at",
            "meal_type",
            "brand_name",
        ) + _DECIMAL_FIELDS
        result: Dict[str, Any] = {}
        for name in names:
            value = getattr(self, name)
            if value is None:
                continue
            result[name] = as_decimal(value, name) if name in _DECIMAL_FIELDS else value
        return result


@dataclass(frozen=True)
class UpdateFoodLogResult:
    """Updated entry and every refreshed balance (ascending by date)."""

    entry: FoodLogEntry
    balances: List[DailyEnergyBalance]


class UpdateFoodLogHandler:
    """Handler for UpdateFoodLogCommand.

    When ``consumed_at`` moves the entry to another day, both the old and
    the new day are recomputed so that the old day does not keep the
    entry's calories.
    """

    def __init__(self, food_ledger: IFoodLedger, controller: SummaryController):
        self._food = food_ledger
        self._controller = controller

    async def handle(self, command: UpdateFoodLogCommand) -> UpdateFoodLogResult:
        """
        Handle food entry update command.

        Raises:
            FoodLogNotFoundError: If the entry does not exist for the user
            InvalidInputError: If no field is given or a value is out of range
        """
        changes = command.changes()
        if not changes:
            raise InvalidInputError("At least one field must be provided for update")

        current = await self._food.get(command.entry_id)
        if current is None or current.user_id != command.user_id:
            raise FoodLogNotFoundError(str(command.entry_id))

        updated = replace(current, **changes)
        await self._food.update(updated)

        affected = {current.log_date, updated.log_date}
        logger.info(
            "Food log updated",
            extra={
                "user_id": updated.user_id,
                "entry_id": str(updated.entry_id),
                "fields": sorted(changes),
                "dates": sorted(d.isoformat() for d in affected),
            },
        )

        balances = [
            await self._controller.recompute_for_food_change(updated.user_id, day)
            for day in sorted(affected)
        ]
        return UpdateFoodLogResult(entry=updated, balances=balances)
