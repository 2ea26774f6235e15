"""In-memory implementation of ICustomMealStore for testing."""

from copy import deepcopy
from typing import List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.custom_meal import CustomMeal
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore


class InMemoryCustomMealStore(ICustomMealStore):
    """In-memory saved meals, keyed by meal ID, deep-copied in and out."""

    def __init__(self) -> None:
        self._meals: dict[UUID, CustomMeal] = {}

    async def get(self, meal_id: UUID) -> Optional[CustomMeal]:
        meal = self._meals.get(meal_id)
        return deepcopy(meal) if meal else None

    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomMeal]:
        meals = [
            meal
            for meal in self._meals.values()
            if meal.user_id == user_id and (meal.is_favorite or not favorites_only)
        ]
        meals.sort(key=lambda m: m.name.lower())
        return [deepcopy(m) for m in meals]

    async def list_using_food(self, user_id: str, food_id: UUID) -> List[CustomMeal]:
        return [
            deepcopy(meal)
            for meal in self._meals.values()
            if meal.user_id == user_id
            and any(c.custom_food_id == food_id for c in meal.components)
        ]

    async def save(self, meal: CustomMeal) -> None:
        self._meals[meal.meal_id] = deepcopy(meal)

    async def delete(self, meal_id: UUID) -> bool:
        return self._meals.pop(meal_id, None) is not None

    def clear(self) -> None:
        """Clear all meals (for testing)."""
        self._meals.clear()

    def count(self) -> int:
        return len(self._meals)
