"""MongoDB repositories (motor)."""

from .activity_ledger import MongoActivityLedger
from .base import MongoBaseRepository
from .custom_food_store import MongoCustomFoodStore
from .custom_meal_store import MongoCustomMealStore
from .food_ledger import MongoFoodLedger
from .profile_store import MongoProfileStore
from .summary_repository import MongoSummaryRepository

__all__ = [
    "MongoBaseRepository",
    "MongoProfileStore",
    "MongoFoodLedger",
    "MongoActivityLedger",
    "MongoSummaryRepository",
    "MongoCustomFoodStore",
    "MongoCustomMealStore",
]
