"""GetProfileQuery - retrieve a user profile."""

from dataclasses import dataclass
from typing import Optional

from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import UnknownUserError
from domain.energy_balance.core.ports.profile_store import IProfileStore


@dataclass(frozen=True)
class GetProfileQuery:
    """Query to retrieve profile by user ID."""

    user_id: str


class GetProfileQueryHandler:
    """Handler for GetProfileQuery.

    Provides read-only access to profiles via the profile store.
    """

    def __init__(self, profile_store: IProfileStore):
        self._profiles = profile_store

    async def handle(self, query: GetProfileQuery) -> Optional[UserProfile]:
        """
        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        try:
            return await self._profiles.get_profile(query.user_id)
        except UnknownUserError:
            return None
