"""ICustomFoodStore port - saved food persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.custom_food import CustomFood


class ICustomFoodStore(ABC):
    """Port for a user's saved foods."""

    @abstractmethod
    async def get(self, food_id: UUID) -> Optional[CustomFood]:
        """Find saved food by ID.

        Returns:
            Optional[CustomFood]: Food if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomFood]:
        """List a user's saved foods, sorted by name."""
        pass

    @abstractmethod
    async def save(self, food: CustomFood) -> None:
        """Save food (create or update)."""
        pass

    @abstractmethod
    async def delete(self, food_id: UUID) -> bool:
        """Delete food by ID.

        Returns:
            bool: True if a food was deleted
        """
        pass
