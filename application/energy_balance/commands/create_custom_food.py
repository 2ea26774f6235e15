"""CreateCustomFoodCommand - save a user-defined food."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.energy_balance.core.entities.custom_food import CustomFood
from domain.energy_balance.core.exceptions.domain_errors import UnknownUserError
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.decimals import Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCustomFoodCommand:
    """Command to save a food. Nutrition values are per serving."""

    user_id: str
    name: str
    calories: int
    serving_size: str
    serving_unit: str
    protein: Number = 0
    carbs: Number = 0
    fat: Number = 0
    brand: Optional[str] = None
    fiber: Optional[Number] = None
    sugar: Optional[Number] = None
    sodium: Optional[Number] = None
    is_favorite: bool = False


class CreateCustomFoodHandler:
    """Handler for CreateCustomFoodCommand."""

    def __init__(self, food_store: ICustomFoodStore, profile_store: IProfileStore):
        self._foods = food_store
        self._profiles = profile_store

    async def handle(self, command: CreateCustomFoodCommand) -> CustomFood:
        """
        Raises:
            UnknownUserError: If the user has no profile
            InvalidInputError: If any value is out of range
        """
        if not await self._profiles.exists(command.user_id):
            raise UnknownUserError(command.user_id)

        food = CustomFood.create(
            user_id=command.user_id,
            name=command.name,
            calories=command.calories,
            serving_size=command.serving_size,
            serving_unit=command.serving_unit,
            protein=command.protein,
            carbs=command.carbs,
            fat=command.fat,
            brand=command.brand,
            fiber=command.fiber,
            sugar=command.sugar,
            sodium=command.sodium,
            is_favorite=command.is_favorite,
        )
        await self._foods.save(food)

        logger.info(
            "Custom food created",
            extra={"user_id": food.user_id, "food_id": str(food.food_id)},
        )
        return food
