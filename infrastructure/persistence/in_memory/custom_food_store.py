"""In-memory implementation of ICustomFoodStore for testing."""

from copy import deepcopy
from typing import List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.custom_food import CustomFood
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore


class InMemoryCustomFoodStore(ICustomFoodStore):
    """In-memory saved foods, keyed by food ID."""

    def __init__(self) -> None:
        self._foods: dict[UUID, CustomFood] = {}

    async def get(self, food_id: UUID) -> Optional[CustomFood]:
        food = self._foods.get(food_id)
        return deepcopy(food) if food else None

    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomFood]:
        foods = [
            food
            for food in self._foods.values()
            if food.user_id == user_id and (food.is_favorite or not favorites_only)
        ]
        foods.sort(key=lambda f: f.name.lower())
        return [deepcopy(f) for f in foods]

    async def save(self, food: CustomFood) -> None:
        self._foods[food.food_id] = deepcopy(food)

    async def delete(self, food_id: UUID) -> bool:
        return self._foods.pop(food_id, None) is not None

    def clear(self) -> None:
        """Clear all foods (for testing)."""
        self._foods.clear()

    def count(self) -> int:
        return len(self._foods)
