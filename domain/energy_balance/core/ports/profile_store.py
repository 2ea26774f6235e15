"""IProfileStore port - user profile persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user_profile import UserProfile
from ..value_objects.bmr import BMR
from ..value_objects.tdee import TDEE


class IProfileStore(ABC):
    """Port for user profile persistence.

    The aggregator only reads profiles; profile commands write them.
    """

    @abstractmethod
    async def get_profile(self, user_id: str) -> UserProfile:
        """Load the profile of a user.

        Args:
            user_id: User identifier

        Returns:
            UserProfile: Current profile

        Raises:
            UnknownUserError: If no profile exists for the user
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update).

        Args:
            profile: Profile to save

        Raises:
            InvalidInputError: If a complete profile lacks BMR/TDEE, or an
                incomplete one carries them
        """
        pass

    @abstractmethod
    async def save_derived_metabolics(
        self, user_id: str, bmr: Optional[BMR], tdee: Optional[TDEE]
    ) -> None:
        """Store derived BMR/TDEE for an existing profile.

        Args:
            user_id: User identifier
            bmr: New BMR, None to clear
            tdee: New TDEE, None to clear

        Raises:
            UnknownUserError: If no profile exists for the user
        """
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if a profile exists for user."""
        pass
