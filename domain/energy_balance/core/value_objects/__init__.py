"""Value objects for energy balance domain."""

from .activity_level import ActivityLevel
from .activity_source import ActivitySource
from .biological_sex import BiologicalSex
from .bmr import BMR
from .decimals import as_decimal, round_half_up
from .meal_type import MealType
from .tdee import TDEE
from .wall_clock import as_wall_clock

__all__ = [
    "ActivityLevel",
    "ActivitySource",
    "BiologicalSex",
    "BMR",
    "TDEE",
    "MealType",
    "as_decimal",
    "as_wall_clock",
    "round_half_up",
]
