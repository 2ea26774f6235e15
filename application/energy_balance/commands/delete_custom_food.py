"""DeleteCustomFoodCommand - remove a saved food."""

import logging
from dataclasses import dataclass
from uuid import UUID

from domain.energy_balance.core.exceptions.domain_errors import CustomFoodNotFoundError
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteCustomFoodCommand:
    food_id: UUID
    user_id: str


class DeleteCustomFoodHandler:
    """Handler for DeleteCustomFoodCommand.

    Meals built from the food keep their components with the cached
    name and nutrition; only the link to the food is dropped, so meal
    totals do not change. Food log entries are left as they are.
    """

    def __init__(self, food_store: ICustomFoodStore, meal_store: ICustomMealStore):
        self._foods = food_store
        self._meals = meal_store

    async def handle(self, command: DeleteCustomFoodCommand) -> int:
        """
        Returns:
            Number of meals that referenced the food

        Raises:
            CustomFoodNotFoundError: If the food is unknown or not the user's
        """
        food = await self._foods.get(command.food_id)
        if food is None or food.user_id != command.user_id:
            raise CustomFoodNotFoundError(str(command.food_id))

        await self._foods.delete(command.food_id)
        meals = await self._meals.list_using_food(command.user_id, command.food_id)
        for meal in meals:
            if meal.forget_custom_food(command.food_id):
                await self._meals.save(meal)

        logger.info(
            "Custom food deleted",
            extra={
                "user_id": command.user_id,
                "food_id": str(command.food_id),
                "meals_unlinked": len(meals),
            },
        )
        return len(meals)
