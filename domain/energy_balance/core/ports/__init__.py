"""Ports for energy balance domain."""

from .activity_ledger import IActivityLedger
from .activity_provider import IActivityProvider, RemoteActivity
from .calculators import IBMRCalculator, ITDEECalculator
from .custom_food_store import ICustomFoodStore
from .custom_meal_store import ICustomMealStore
from .food_ledger import IFoodLedger
from .profile_store import IProfileStore
from .summary_repository import ISummaryRepository

__all__ = [
    "IProfileStore",
    "IFoodLedger",
    "IActivityLedger",
    "ISummaryRepository",
    "ICustomFoodStore",
    "ICustomMealStore",
    "IActivityProvider",
    "RemoteActivity",
    "IBMRCalculator",
    "ITDEECalculator",
]
