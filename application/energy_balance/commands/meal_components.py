"""Meal component commands - edit a saved meal's foods.

Every change recomputes the meal's totals before it is saved.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.energy_balance.core.entities.custom_meal import CustomMeal, MealComponent
from domain.energy_balance.core.exceptions.domain_errors import (
    CustomFoodNotFoundError,
    CustomMealNotFoundError,
    InvalidInputError,
)
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore
from domain.energy_balance.core.value_objects.decimals import Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealComponentSpec:
    """Food to put in a meal: a saved food, or a USDA food with its values.

    With ``custom_food_id`` the name and nutrition come from the saved
    food. Otherwise ``usda_fdc_id`` and every nutrition field are required.
    """

    quantity: Number = 1
    custom_food_id: Optional[UUID] = None
    usda_fdc_id: Optional[str] = None
    food_name: Optional[str] = None
    brand_name: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[Number] = None
    carbs: Optional[Number] = None
    fat: Optional[Number] = None
    serving_size: Optional[str] = None
    serving_unit: Optional[str] = None


async def build_component(
    spec: MealComponentSpec, user_id: str, food_store: ICustomFoodStore
) -> MealComponent:
    """Build a component, copying values from a saved food.

    Raises:
        CustomFoodNotFoundError: If the saved food is unknown or not the user's
        InvalidInputError: If both or neither source is given, or a
            USDA food lacks a value
    """
    if (spec.custom_food_id is None) == (spec.usda_fdc_id is None):
        raise InvalidInputError("Give exactly one of customFoodId or usdaFdcId")

    if spec.custom_food_id is not None:
        food = await food_store.get(spec.custom_food_id)
        if food is None or food.user_id != user_id:
            raise CustomFoodNotFoundError(str(spec.custom_food_id))
        return MealComponent.from_custom_food(food, spec.quantity)

    missing = [
        name
        for name in (
            "food_name",
            "calories",
            "protein",
            "carbs",
            "fat",
            "serving_size",
            "serving_unit",
        )
        if getattr(spec, name) is None
    ]
    if missing:
        raise InvalidInputError(f"USDA meal component is missing: {', '.join(missing)}")
    return MealComponent.create(
        food_name=spec.food_name,  # type: ignore[arg-type]
        calories=spec.calories,  # type: ignore[arg-type]
        protein=spec.protein,  # type: ignore[arg-type]
        carbs=spec.carbs,  # type: ignore[arg-type]
        fat=spec.fat,  # type: ignore[arg-type]
        serving_size=spec.serving_size,  # type: ignore[arg-type]
        serving_unit=spec.serving_unit,  # type: ignore[arg-type]
        quantity=spec.quantity,
        usda_fdc_id=spec.usda_fdc_id,
        brand_name=spec.brand_name,
    )


async def load_meal(meal_store: ICustomMealStore, meal_id: UUID, user_id: str) -> CustomMeal:
    """
    Raises:
        CustomMealNotFoundError: If the meal is unknown or owned by someone else
    """
    meal = await meal_store.get(meal_id)
    if meal is None or meal.user_id != user_id:
        raise CustomMealNotFoundError(str(meal_id))
    return meal


@dataclass(frozen=True)
class AddMealComponentCommand:
    meal_id: UUID
    user_id: str
    component: MealComponentSpec


class AddMealComponentHandler:
    """Handler for AddMealComponentCommand."""

    def __init__(self, meal_store: ICustomMealStore, food_store: ICustomFoodStore):
        self._meals = meal_store
        self._foods = food_store

    async def handle(self, command: AddMealComponentCommand) -> CustomMeal:
        meal = await load_meal(self._meals, command.meal_id, command.user_id)
        component = await build_component(command.component, command.user_id, self._foods)
        meal.add_component(component)
        await self._meals.save(meal)

        logger.info(
            "Meal component added",
            extra={
                "meal_id": str(meal.meal_id),
                "component_id": str(component.component_id),
                "total_calories": meal.total_calories,
            },
        )
        return meal


@dataclass(frozen=True)
class UpdateMealComponentCommand:
    """Change one component. None leaves a value unchanged."""

    meal_id: UUID
    user_id: str
    component_id: UUID
    quantity: Optional[Number] = None
    calories: Optional[int] = None
    protein: Optional[Number] = None
    carbs: Optional[Number] = None
    fat: Optional[Number] = None

    def __post_init__(self) -> None:
        if all(
            getattr(self, name) is None
            for name in ("quantity", "calories", "protein", "carbs", "fat")
        ):
            raise InvalidInputError("At least one field must be provided for update")


class UpdateMealComponentHandler:
    """Handler for UpdateMealComponentCommand."""

    def __init__(self, meal_store: ICustomMealStore):
        self._meals = meal_store

    async def handle(self, command: UpdateMealComponentCommand) -> CustomMeal:
        """
        Raises:
            CustomMealNotFoundError: If the meal or the component is unknown
            InvalidInputError: If a value is out of range
        """
        meal = await load_meal(self._meals, command.meal_id, command.user_id)
        meal.update_component(
            command.component_id,
            quantity=command.quantity,
            calories=command.calories,
            protein=command.protein,
            carbs=command.carbs,
            fat=command.fat,
        )
        await self._meals.save(meal)

        logger.info(
            "Meal component updated",
            extra={
                "meal_id": str(meal.meal_id),
                "component_id": str(command.component_id),
                "total_calories": meal.total_calories,
            },
        )
        return meal


@dataclass(frozen=True)
class RemoveMealComponentCommand:
    meal_id: UUID
    user_id: str
    component_id: UUID


class RemoveMealComponentHandler:
    """Handler for RemoveMealComponentCommand."""

    def __init__(self, meal_store: ICustomMealStore):
        self._meals = meal_store

    async def handle(self, command: RemoveMealComponentCommand) -> CustomMeal:
        meal = await load_meal(self._meals, command.meal_id, command.user_id)
        meal.remove_component(command.component_id)
        await self._meals.save(meal)

        logger.info(
            "Meal component removed",
            extra={
                "meal_id": str(meal.meal_id),
                "component_id": str(command.component_id),
                "total_calories": meal.total_calories,
            },
        )
        return meal
