"""GraphQL types for the energy balance domain.

Decimal quantities (grams, kg) are exposed with the Strawberry ``Decimal``
scalar, serialized as strings, so no precision is lost on the wire.
Calorie figures are whole kcal integers.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

import strawberry

__all__ = [
    # Output types
    "DailyEnergyBalanceType",
    "BalanceStatisticsType",
    "UserProfileType",
    "FoodLogEntryType",
    "ActivityEntryType",
    "LogFoodResultType",
    "UpdateFoodLogResultType",
    "LogActivityResultType",
    "SyncActivitiesResultType",
    "CustomFoodType",
    "MealComponentType",
    "CustomMealType",
    "LogMealResultType",
    # Input types
    "CreateProfileInput",
    "UpdateProfileInput",
    "LogFoodInput",
    "UpdateFoodLogInput",
    "LogActivityInput",
    "CreateCustomFoodInput",
    "MealComponentInput",
    "CreateCustomMealInput",
    "UpdateMealComponentInput",
    "LogCustomFoodInput",
    "LogMealInput",
]


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class DailyEnergyBalanceType:
    """Stored energy balance of one user on one date."""

    user_id: str
    date: date
    calories_consumed: int
    protein_consumed: Decimal  # grams
    carbs_consumed: Decimal  # grams
    fat_consumed: Decimal  # grams
    calories_burned_baseline: int
    calories_burned_exercise: int
    total_burned: int
    net_calories: int  # negative = deficit
    updated_at: datetime


@strawberry.type
class BalanceStatisticsType:
    """Averages over the stored balances of a period."""

    start_date: date
    end_date: date
    days_recorded: int
    avg_calories_consumed: Decimal
    avg_protein: Decimal
    avg_carbs: Decimal
    avg_fat: Decimal
    avg_calories_burned: Decimal
    avg_net_calories: Decimal
    total_exercise_minutes: int


@strawberry.type
class UserProfileType:
    """Physical inputs and derived metabolic figures."""

    user_id: str
    created_at: datetime
    updated_at: datetime
    weight_kg: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None
    age: Optional[int] = None
    sex: Optional[str] = None
    activity_level: Optional[str] = None
    bmr: Optional[Decimal] = None  # kcal/day, full precision
    tdee: Optional[Decimal] = None  # kcal/day, full precision


@strawberry.type
class FoodLogEntryType:
    """Food consumption record (values per serving)."""

    id: strawberry.ID
    user_id: str
    food_name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    servings: Decimal
    consumed_at: datetime
    meal_type: Optional[str] = None
    brand_name: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None
    usda_fdc_id: Optional[str] = None
    custom_food_id: Optional[strawberry.ID] = None
    custom_meal_id: Optional[strawberry.ID] = None


@strawberry.type
class ActivityEntryType:
    """Exercise session."""

    id: strawberry.ID
    user_id: str
    external_id: str
    activity_type: str
    calories: int
    duration_s: int
    started_at: datetime
    source: str
    distance_m: Optional[Decimal] = None
    name: Optional[str] = None


@strawberry.type
class LogFoodResultType:
    entry: FoodLogEntryType
    balance: DailyEnergyBalanceType


@strawberry.type
class UpdateFoodLogResultType:
    entry: FoodLogEntryType
    balances: List[DailyEnergyBalanceType]


@strawberry.type
class LogActivityResultType:
    entry: ActivityEntryType
    balance: DailyEnergyBalanceType


@strawberry.type
class SyncActivitiesResultType:
    inserted: int
    updated: int
    estimated: int
    balances: List[DailyEnergyBalanceType]


@strawberry.type
class CustomFoodType:
    """Saved food (values per serving)."""

    id: strawberry.ID
    user_id: str
    name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    serving_size: str
    serving_unit: str
    is_favorite: bool
    created_at: datetime
    updated_at: datetime
    brand: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None


@strawberry.type
class MealComponentType:
    id: strawberry.ID
    food_name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    serving_size: str
    serving_unit: str
    quantity: Decimal
    custom_food_id: Optional[strawberry.ID] = None
    usda_fdc_id: Optional[str] = None
    brand_name: Optional[str] = None


@strawberry.type
class CustomMealType:
    """Saved meal with totals over its components."""

    id: strawberry.ID
    user_id: str
    name: str
    is_favorite: bool
    components: List[MealComponentType]
    total_calories: int
    total_protein: Decimal
    total_carbs: Decimal
    total_fat: Decimal
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None


@strawberry.type
class LogMealResultType:
    entries: List[FoodLogEntryType]
    balance: DailyEnergyBalanceType


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class CreateProfileInput:
    """Create a profile; physical inputs may be filled in later."""

    user_id: str
    weight_kg: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None
    age: Optional[int] = None
    sex: Optional[str] = None  # male | female | other
    activity_level: Optional[str] = None  # sedentary ... extra_active


@strawberry.input
class UpdateProfileInput:
    """Change physical inputs; omitted fields stay unchanged."""

    user_id: str
    weight_kg: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None
    age: Optional[int] = None
    sex: Optional[str] = None
    activity_level: Optional[str] = None


@strawberry.input
class LogFoodInput:
    user_id: str
    food_name: str
    calories: int
    protein: Decimal
    carbs: Decimal
    fat: Decimal
    consumed_at: datetime
    servings: Decimal = Decimal(1)
    meal_type: Optional[str] = None
    brand_name: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None
    usda_fdc_id: Optional[str] = None


@strawberry.input
class UpdateFoodLogInput:
    entry_id: strawberry.ID
    user_id: str
    food_name: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[Decimal] = None
    carbs: Optional[Decimal] = None
    fat: Optional[Decimal] = None
    servings: Optional[Decimal] = None
    consumed_at: Optional[datetime] = None
    meal_type: Optional[str] = None
    brand_name: Optional[str] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None


@strawberry.input
class LogActivityInput:
    """Manual exercise session; calories are estimated when omitted."""

    user_id: str
    activity_type: str
    duration_s: int
    started_at: datetime
    calories: Optional[int] = None
    distance_m: Optional[Decimal] = None
    name: Optional[str] = None


@strawberry.input
class CreateCustomFoodInput:
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


@strawberry.input
class MealComponentInput:
    """A saved food (customFoodId) or a USDA food with all its values."""

    quantity: Decimal = Decimal(1)
    custom_food_id: Optional[strawberry.ID] = None
    usda_fdc_id: Optional[str] = None
    food_name: Optional[str] = None
    brand_name: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[Decimal] = None
    carbs: Optional[Decimal] = None
    fat: Optional[Decimal] = None
    serving_size: Optional[str] = None
    serving_unit: Optional[str] = None


@strawberry.input
class CreateCustomMealInput:
    user_id: str
    name: str
    description: Optional[str] = None
    is_favorite: bool = False
    components: List[MealComponentInput] = strawberry.field(default_factory=list)


@strawberry.input
class UpdateMealComponentInput:
    meal_id: strawberry.ID
    component_id: strawberry.ID
    user_id: str
    quantity: Optional[Decimal] = None
    calories: Optional[int] = None
    protein: Optional[Decimal] = None
    carbs: Optional[Decimal] = None
    fat: Optional[Decimal] = None


@strawberry.input
class LogCustomFoodInput:
    user_id: str
    food_id: strawberry.ID
    consumed_at: datetime
    servings: Decimal = Decimal(1)
    meal_type: Optional[str] = None


@strawberry.input
class LogMealInput:
    """Log every component of a saved meal, scaled by ``servings``."""

    user_id: str
    meal_id: strawberry.ID
    consumed_at: datetime
    servings: Decimal = Decimal(1)
    meal_type: Optional[str] = None
