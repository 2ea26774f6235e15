"""In-memory repositories for testing and development."""

from .activity_ledger import InMemoryActivityLedger
from .custom_food_store import InMemoryCustomFoodStore
from .custom_meal_store import InMemoryCustomMealStore
from .food_ledger import InMemoryFoodLedger
from .profile_store import InMemoryProfileStore
from .summary_repository import InMemorySummaryRepository

__all__ = [
    "InMemoryProfileStore",
    "InMemoryFoodLedger",
    "InMemoryActivityLedger",
    "InMemorySummaryRepository",
    "InMemoryCustomFoodStore",
    "InMemoryCustomMealStore",
]
