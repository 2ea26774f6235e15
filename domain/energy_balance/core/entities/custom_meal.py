"""CustomMeal entity - a saved combination of foods with cached totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Optional
from uuid import UUID, uuid4

from ..exceptions.domain_errors import CustomMealNotFoundError, InvalidInputError
from ..value_objects.decimals import Number, as_decimal, round_half_up
from .custom_food import CustomFood, non_negative, non_negative_int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MealComponent:
    """One food inside a saved meal.

    Name and nutrition are copied from the source food, so the component
    survives the source being deleted. A component points at a custom
    food or at a USDA food, never both; ``custom_food_id`` is cleared when
    that food is deleted.

    Attributes:
        component_id: Unique component identifier
        food_name: Cached food name
        calories: kcal per serving
        quantity: Servings of this food in one meal (> 0)
    """

    component_id: UUID
    food_name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    serving_size: str
    serving_unit: str
    quantity: Decimal = Decimal(1)
    custom_food_id: Optional[UUID] = None
    usda_fdc_id: Optional[str] = None
    brand_name: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.food_name or not self.food_name.strip():
            raise InvalidInputError("Food name cannot be empty")
        if self.custom_food_id is not None and self.usda_fdc_id is not None:
            raise InvalidInputError(
                "A meal component references a custom food or a USDA food, not both"
            )
        self.calories = non_negative_int(self.calories, "calories")
        self.protein = non_negative(self.protein, "protein")
        self.carbs = non_negative(self.carbs, "carbs")
        self.fat = non_negative(self.fat, "fat")
        self.quantity = as_decimal(self.quantity, "quantity")
        if self.quantity <= 0:
            raise InvalidInputError(f"quantity must be positive, got {self.quantity}")

    @staticmethod
    def create(
        food_name: str,
        calories: int,
        protein: Number,
        carbs: Number,
        fat: Number,
        serving_size: str,
        serving_unit: str,
        quantity: Number = 1,
        **optional: Any,
    ) -> "MealComponent":
        return MealComponent(
            component_id=uuid4(),
            food_name=food_name,
            calories=calories,
            protein=as_decimal(protein, "protein"),
            carbs=as_decimal(carbs, "carbs"),
            fat=as_decimal(fat, "fat"),
            serving_size=serving_size,
            serving_unit=serving_unit,
            quantity=as_decimal(quantity, "quantity"),
            **optional,
        )

    @staticmethod
    def from_custom_food(food: CustomFood, quantity: Number = 1) -> "MealComponent":
        """Copy a saved food's name and nutrition into a new component."""
        return MealComponent.create(
            food_name=food.name,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            serving_size=food.serving_size,
            serving_unit=food.serving_unit,
            quantity=quantity,
            custom_food_id=food.food_id,
            brand_name=food.brand,
        )


@dataclass
class CustomMeal:
    """Saved meal whose totals are ``Σ value × quantity`` over its components.

    Totals are recomputed on construction and after every component
    change, so they always match the components. ``total_calories`` is
    rounded half-up to whole kcal.
    """

    meal_id: UUID
    user_id: str
    name: str
    description: Optional[str] = None
    components: List[MealComponent] = field(default_factory=list)
    is_favorite: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    total_calories: int = field(init=False, default=0)
    total_protein: Decimal = field(init=False, default=Decimal(0))
    total_carbs: Decimal = field(init=False, default=Decimal(0))
    total_fat: Decimal = field(init=False, default=Decimal(0))

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidInputError("User ID cannot be empty")
        if not self.name or not self.name.strip():
            raise InvalidInputError("Meal name cannot be empty")
        self.components = list(self.components)
        self._recalculate_totals()

    @staticmethod
    def create(
        user_id: str,
        name: str,
        description: Optional[str] = None,
        components: Optional[List[MealComponent]] = None,
        is_favorite: bool = False,
    ) -> "CustomMeal":
        """Create a new saved meal with a generated identifier."""
        return CustomMeal(
            meal_id=uuid4(),
            user_id=user_id,
            name=name,
            description=description,
            components=components or [],
            is_favorite=is_favorite,
        )

    def add_component(self, component: MealComponent) -> None:
        self.components.append(component)
        self._touch()

    def update_component(
        self,
        component_id: UUID,
        quantity: Optional[Number] = None,
        calories: Optional[int] = None,
        protein: Optional[Number] = None,
        carbs: Optional[Number] = None,
        fat: Optional[Number] = None,
    ) -> MealComponent:
        """Change a component's quantity or nutrition; None leaves a value as is.

        Raises:
            CustomMealNotFoundError: If the component is not in this meal
            InvalidInputError: If a value is out of range
        """
        index = self._index_of(component_id)
        current = self.components[index]
        updated = MealComponent(
            component_id=current.component_id,
            food_name=current.food_name,
            calories=current.calories if calories is None else calories,
            protein=current.protein if protein is None else as_decimal(protein, "protein"),
            carbs=current.carbs if carbs is None else as_decimal(carbs, "carbs"),
            fat=current.fat if fat is None else as_decimal(fat, "fat"),
            serving_size=current.serving_size,
            serving_unit=current.serving_unit,
            quantity=current.quantity if quantity is None else as_decimal(quantity, "quantity"),
            custom_food_id=current.custom_food_id,
            usda_fdc_id=current.usda_fdc_id,
            brand_name=current.brand_name,
            created_at=current.created_at,
        )
        self.components[index] = updated
        self._touch()
        return updated

    def remove_component(self, component_id: UUID) -> MealComponent:
        """
        Raises:
            CustomMealNotFoundError: If the component is not in this meal
        """
        removed = self.components.pop(self._index_of(component_id))
        self._touch()
        return removed

    def forget_custom_food(self, food_id: UUID) -> bool:
        """Drop references to a deleted custom food, keeping the cached values.

        Returns:
            True if any component referenced the food
        """
        touched = False
        for component in self.components:
            if component.custom_food_id == food_id:
                component.custom_food_id = None
                touched = True
        if touched:
            self.updated_at = _utcnow()
        return touched

    def _index_of(self, component_id: UUID) -> int:
        for index, component in enumerate(self.components):
            if component.component_id == component_id:
                return index
        raise CustomMealNotFoundError(str(self.meal_id), str(component_id))

    def _touch(self) -> None:
        self._recalculate_totals()
        self.updated_at = _utcnow()

    def _recalculate_totals(self) -> None:
        self.total_calories = round_half_up(
            sum((c.calories * c.quantity for c in self.components), Decimal(0))
        )
        self.total_protein = sum((c.protein * c.quantity for c in self.components), Decimal(0))
        self.total_carbs = sum((c.carbs * c.quantity for c in self.components), Decimal(0))
        self.total_fat = sum((c.fat * c.quantity for c in self.components), Decimal(0))
