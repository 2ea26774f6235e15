"""ICustomMealStore port - saved meal persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.custom_meal import CustomMeal


class ICustomMealStore(ABC):
    """Port for a user's saved meals.

    A meal is stored whole, components and cached totals included.
    """

    @abstractmethod
    async def get(self, meal_id: UUID) -> Optional[CustomMeal]:
        """Find saved meal by ID.

        Returns:
            Optional[CustomMeal]: Meal if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomMeal]:
        """List a user's saved meals, sorted by name."""
        pass

    @abstractmethod
    async def list_using_food(self, user_id: str, food_id: UUID) -> List[CustomMeal]:
        """List a user's meals with a component taken from ``food_id``."""
        pass

    @abstractmethod
    async def save(self, meal: CustomMeal) -> None:
        """Save meal (create or update)."""
        pass

    @abstractmethod
    async def delete(self, meal_id: UUID) -> bool:
        """Delete meal by ID, components included.

        Returns:
            bool: True if a meal was deleted
        """
        pass
