"""In-memory implementation of IProfileStore for testing."""

from copy import deepcopy
from typing import Optional

from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import UnknownUserError
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.bmr import BMR
from domain.energy_balance.core.value_objects.tdee import TDEE


class InMemoryProfileStore(IProfileStore):
    """
    In-memory implementation of the profile store.

    Uses a dictionary keyed by user ID. Suitable for testing and
    development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._profiles: dict[str, UserProfile] = {}

    async def get_profile(self, user_id: str) -> UserProfile:
        """
        Get profile by user ID.

        Returns:
            Deep copy of the stored profile

        Raises:
            UnknownUserError: If no profile exists for the user
        """
        profile = self._profiles.get(user_id)
        if profile is None:
            raise UnknownUserError(user_id)
        return deepcopy(profile)

    async def save(self, profile: UserProfile) -> None:
        """
        Raises:
            InvalidInputError: If BMR/TDEE presence does not match the inputs
        """
        profile.check_metrics()
        # Deep copy to prevent external mutations
        self._profiles[profile.user_id] = deepcopy(profile)

    async def save_derived_metabolics(
        self, user_id: str, bmr: Optional[BMR], tdee: Optional[TDEE]
    ) -> None:
        profile = self._profiles.get(user_id)
        if profile is None:
            raise UnknownUserError(user_id)
        profile.apply_metrics(bmr, tdee)

    async def exists(self, user_id: str) -> bool:
        return user_id in self._profiles

    def clear(self) -> None:
        """
        Clear all profiles from memory.

        Useful for test cleanup.
        """
        self._profiles.clear()

    def count(self) -> int:
        """Get total number of profiles in memory."""
        return len(self._profiles)
