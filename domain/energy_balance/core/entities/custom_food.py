"""CustomFood entity - a food the user saved with its own nutrition facts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from ..exceptions.domain_errors import InvalidInputError
from ..value_objects.decimals import Number, as_decimal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CustomFood:
    """User-defined food, reusable when logging and when building meals.

    Nutrition values are per serving of ``serving_size`` ``serving_unit``
    (e.g. ``"100"`` ``"g"``).
    """

    food_id: UUID
    user_id: str
    name: str
    calories: int
    serving_size: str
    serving_unit: str
    protein: Decimal = Decimal(0)
    carbs: Decimal = Decimal(0)
    fat: Decimal = Decimal(0)
    brand: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None
    is_favorite: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidInputError("User ID cannot be empty")
        if not self.name or not self.name.strip():
            raise InvalidInputError("Food name cannot be empty")
        for name in ("serving_size", "serving_unit"):
            if not getattr(self, name) or not str(getattr(self, name)).strip():
                raise InvalidInputError(f"{name} cannot be empty")
        self.calories = non_negative_int(self.calories, "calories")
        self.protein = non_negative(self.protein, "protein")
        self.carbs = non_negative(self.carbs, "carbs")
        self.fat = non_negative(self.fat, "fat")
        for name in ("fiber", "sugar", "sodium"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, non_negative(value, name))

    @staticmethod
    def create(
        user_id: str,
        name: str,
        calories: int,
        serving_size: str,
        serving_unit: str,
        protein: Number = 0,
        carbs: Number = 0,
        fat: Number = 0,
        **optional: object,
    ) -> "CustomFood":
        """Create a new saved food with a generated identifier."""
        return CustomFood(
            food_id=uuid4(),
            user_id=user_id,
            name=name,
            calories=calories,
            serving_size=serving_size,
            serving_unit=serving_unit,
            protein=as_decimal(protein, "protein"),
            carbs=as_decimal(carbs, "carbs"),
            fat=as_decimal(fat, "fat"),
            **optional,  # type: ignore[arg-type]
        )


def non_negative(value: Number, field_name: str) -> Decimal:
    result = as_decimal(value, field_name)
    if result < 0:
        raise InvalidInputError(f"{field_name} must be non-negative, got {value}")
    return result


def non_negative_int(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{field_name} must be non-negative, got {value}")
    return value
