"""Saved food and meal queries."""

from dataclasses import dataclass
from typing import List

from domain.energy_balance.core.entities.custom_food import CustomFood
from domain.energy_balance.core.entities.custom_meal import CustomMeal
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore


@dataclass(frozen=True)
class GetCustomFoodsQuery:
    user_id: str
    favorites_only: bool = False


class GetCustomFoodsQueryHandler:
    """Handler for GetCustomFoodsQuery. Unknown users have no foods."""

    def __init__(self, food_store: ICustomFoodStore):
        self._foods = food_store

    async def handle(self, query: GetCustomFoodsQuery) -> List[CustomFood]:
        return await self._foods.list_for_user(
            query.user_id, favorites_only=query.favorites_only
        )


@dataclass(frozen=True)
class GetCustomMealsQuery:
    user_id: str
    favorites_only: bool = False


class GetCustomMealsQueryHandler:
    """Handler for GetCustomMealsQuery."""

    def __init__(self, meal_store: ICustomMealStore):
        self._meals = meal_store

    async def handle(self, query: GetCustomMealsQuery) -> List[CustomMeal]:
        return await self._meals.list_for_user(
            query.user_id, favorites_only=query.favorites_only
        )
