"""IActivityProvider port - remote source of exercise sessions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class RemoteActivity:
    """Exercise session as reported by a remote provider.

    Attributes:
        external_id: Provider's activity ID
        activity_type: Provider's activity category (Run, Ride, ...)
        started_at: Local start time
        duration_s: Moving time in seconds
        calories: Calories if the provider reports them
        distance_m: Distance in meters if any
        name: Activity title
    """

    external_id: str
    activity_type: str
    started_at: datetime
    duration_s: int
    calories: Optional[int] = None
    distance_m: Optional[Decimal] = None
    name: Optional[str] = None


class IActivityProvider(ABC):
    """Port for remote activity providers (e.g. Strava)."""

    @abstractmethod
    async def fetch_activities(
        self, access_token: str, after: Optional[datetime] = None
    ) -> List[RemoteActivity]:
        """Fetch the athlete's activities.

        Args:
            access_token: OAuth bearer token, already obtained
            after: Only activities started after this instant

        Returns:
            List[RemoteActivity]: Activities, oldest first

        Raises:
            ActivityProviderError: If the provider rejects or fails the request
        """
        pass
