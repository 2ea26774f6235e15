"""Entities for energy balance domain."""

from .activity_entry import ActivityEntry
from .custom_food import CustomFood
from .custom_meal import CustomMeal, MealComponent
from .daily_energy_balance import DailyEnergyBalance, DailyEnergyBalanceDraft
from .food_log_entry import FoodLogEntry
from .user_profile import UserProfile

__all__ = [
    "UserProfile",
    "FoodLogEntry",
    "ActivityEntry",
    "DailyEnergyBalance",
    "DailyEnergyBalanceDraft",
    "CustomFood",
    "CustomMeal",
    "MealComponent",
]
