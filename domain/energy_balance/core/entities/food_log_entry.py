"""FoodLogEntry entity - one instance of food consumption."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID, uuid4

from ..exceptions.domain_errors import InvalidInputError
from ..value_objects.decimals import Number, as_decimal
from ..value_objects.meal_type import MealType
from ..value_objects.wall_clock import as_wall_clock


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FoodLogEntry:
    """Food consumption record in the food ledger.

    Calories and macros are per single serving; the entry contributes
    ``value × servings`` to its day's totals.

    Attributes:
        entry_id: Unique entry identifier
        user_id: Owning user
        food_name: Free-text food name
        calories: kcal per serving (non-negative integer)
        protein: grams per serving
        carbs: grams per serving
        fat: grams per serving
        consumed_at: When the food was eaten, as a naive wall-clock time in
            the user's reference day (an offset, if given, is dropped)
        servings: Serving multiplier (> 0)
        custom_food_id: Saved food the entry was logged from, if any
        custom_meal_id: Saved meal the entry was expanded from, if any
    """

    entry_id: UUID
    user_id: str
    food_name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    consumed_at: datetime
    servings: Decimal = Decimal(1)
    meal_type: Optional[MealType] = None
    brand_name: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None
    usda_fdc_id: Optional[str] = None
    custom_food_id: Optional[UUID] = None
    custom_meal_id: Optional[UUID] = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidInputError("User ID cannot be empty")
        if not self.food_name or not self.food_name.strip():
            raise InvalidInputError("Food name cannot be empty")
        if isinstance(self.calories, bool) or not isinstance(self.calories, int):
            raise InvalidInputError(f"calories must be an integer, got {self.calories!r}")
        if self.calories < 0:
            raise InvalidInputError(f"calories must be non-negative, got {self.calories}")
        self.consumed_at = as_wall_clock(self.consumed_at, "consumed_at")

        self.protein = _non_negative(self.protein, "protein")
        self.carbs = _non_negative(self.carbs, "carbs")
        self.fat = _non_negative(self.fat, "fat")
        self.servings = as_decimal(self.servings, "servings")
        if self.servings <= 0:
            raise InvalidInputError(f"servings must be positive, got {self.servings}")

        for name in ("fiber", "sugar", "sodium"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, _non_negative(value, name))
        if self.meal_type is not None:
            self.meal_type = _parse_meal_type(self.meal_type)

    @staticmethod
    def create(
        user_id: str,
        food_name: str,
        calories: int,
        protein: Number,
        carbs: Number,
        fat: Number,
        consumed_at: datetime,
        servings: Number = 1,
        **optional: object,
    ) -> "FoodLogEntry":
        """Create a new entry with a generated identifier."""
        return FoodLogEntry(
            entry_id=uuid4(),
            user_id=user_id,
            food_name=food_name,
            calories=calories,
            protein=as_decimal(protein, "protein"),
            carbs=as_decimal(carbs, "carbs"),
            fat=as_decimal(fat, "fat"),
            consumed_at=consumed_at,
            servings=as_decimal(servings, "servings"),
            **optional,  # type: ignore[arg-type]
        )

    @property
    def log_date(self) -> date:
        """Calendar date the entry counts towards."""
        return self.consumed_at.date()

    @property
    def total_calories(self) -> Decimal:
        return self.calories * self.servings

    @property
    def total_protein(self) -> Decimal:
        return self.protein * self.servings

    @property
    def total_carbs(self) -> Decimal:
        return self.carbs * self.servings

    @property
    def total_fat(self) -> Decimal:
        return self.fat * self.servings


def _non_negative(value: Number, field_name: str) -> Decimal:
    result = as_decimal(value, field_name)
    if result < 0:
        raise InvalidInputError(f"{field_name} must be non-negative, got {value}")
    return result


def _parse_meal_type(value: Union[MealType, str]) -> MealType:
    try:
        return MealType(str(value.value if isinstance(value, MealType) else value).lower())
    except ValueError as e:
        raise InvalidInputError(f"Unknown meal type: {value!r}") from e
