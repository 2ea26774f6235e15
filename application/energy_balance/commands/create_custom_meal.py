"""CreateCustomMealCommand - save a named combination of foods."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.energy_balance.core.entities.custom_meal import CustomMeal
from domain.energy_balance.core.exceptions.domain_errors import UnknownUserError
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore
from domain.energy_balance.core.ports.profile_store import IProfileStore

from .meal_components import MealComponentSpec, build_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCustomMealCommand:
    """Command to save a meal, optionally with its first components."""

    user_id: str
    name: str
    description: Optional[str] = None
    is_favorite: bool = False
    components: Tuple[MealComponentSpec, ...] = ()


class CreateCustomMealHandler:
    """Handler for CreateCustomMealCommand."""

    def __init__(
        self,
        meal_store: ICustomMealStore,
        food_store: ICustomFoodStore,
        profile_store: IProfileStore,
    ):
        self._meals = meal_store
        self._foods = food_store
        self._profiles = profile_store

    async def handle(self, command: CreateCustomMealCommand) -> CustomMeal:
        """
        Raises:
            UnknownUserError: If the user has no profile
            CustomFoodNotFoundError: If a component names an unknown saved food
            InvalidInputError: If any value is out of range
        """
        if not await self._profiles.exists(command.user_id):
            raise UnknownUserError(command.user_id)

        components = [
            await build_component(spec, command.user_id, self._foods)
            for spec in command.components
        ]
        meal = CustomMeal.create(
            user_id=command.user_id,
            name=command.name,
            description=command.description,
            components=components,
            is_favorite=command.is_favorite,
        )
        await self._meals.save(meal)

        logger.info(
            "Custom meal created",
            extra={
                "user_id": meal.user_id,
                "meal_id": str(meal.meal_id),
                "components": len(meal.components),
                "total_calories": meal.total_calories,
            },
        )
        return meal
