"""Strava API client - Implements IActivityProvider port.

Key Features:
- Athlete activity listing (paged)
- Circuit breaker (5 failures → 60s timeout)
- Retry logic (exponential backoff) on network errors and 5xx
- Mapping of summary activities to RemoteActivity

Token acquisition (OAuth) happens elsewhere; this client only needs a
valid bearer token.
"""
# mypy: warn-unused-ignores=False

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

import httpx
from circuitbreaker import CircuitBreakerError, circuit
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.energy_balance.core.exceptions.domain_errors import ActivityProviderError
from domain.energy_balance.core.ports.activity_provider import (
    IActivityProvider,
    RemoteActivity,
)
from domain.energy_balance.core.value_objects.decimals import round_half_up
from infrastructure.config import get_strava_api_base_url

logger = logging.getLogger(__name__)


class StravaServerError(Exception):
    """Transient Strava failure (5xx, rate limit)."""

    pass


_TRANSIENT_ERRORS = (httpx.TransportError, StravaServerError)
# Open circuit: calls are refused without reaching Strava
_UNAVAILABLE_ERRORS = _TRANSIENT_ERRORS + (CircuitBreakerError,)


class StravaActivityClient(IActivityProvider):
    """
    Strava API client implementing IActivityProvider port.

    Example:
        >>> async with StravaActivityClient() as client:
        ...     activities = await client.fetch_activities(token)
    """

    PER_PAGE = 100
    MAX_PAGES = 20
    TIMEOUT_S = 10.0

    def __init__(self, base_url: Optional[str] = None) -> None:
        """
        Initialize Strava client.

        Args:
            base_url: API root (defaults to STRAVA_API_BASE_URL)
        """
        self.base_url = (base_url or get_strava_api_base_url()).rstrip("/")
        self._session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "StravaActivityClient":
        """Async context manager entry."""
        self._session = httpx.AsyncClient(timeout=httpx.Timeout(self.TIMEOUT_S))
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.aclose()

    async def fetch_activities(
        self, access_token: str, after: Optional[datetime] = None
    ) -> List[RemoteActivity]:
        """
        Fetch all athlete activities, following pagination.

        Implements IActivityProvider.fetch_activities() port.

        Args:
            access_token: OAuth bearer token
            after: Only activities started after this instant

        Returns:
            Activities sorted by start time (oldest first)

        Raises:
            ActivityProviderError: On rejected token, client errors, or
                when retries are exhausted
        """
        if not self._session:
            raise RuntimeError("Client not initialized. Use async context manager.")

        params: Dict[str, Any] = {"per_page": self.PER_PAGE}
        if after is not None:
            if after.tzinfo is None:
                after = after.replace(tzinfo=timezone.utc)
            params["after"] = int(after.timestamp())

        activities: List[RemoteActivity] = []
        for page in range(1, self.MAX_PAGES + 1):
            try:
                items = await self._get_page(access_token, {**params, "page": page})
            except _UNAVAILABLE_ERRORS as e:
                logger.error(
                    "Strava API unavailable",
                    extra={"page": page, "error": str(e)},
                )
                raise ActivityProviderError(f"Strava API unavailable: {e}") from e

            activities.extend(self.map_activity(item) for item in items)
            if len(items) < self.PER_PAGE:
                break

        logger.info(
            "Strava activities fetched",
            extra={"count": len(activities), "after": params.get("after")},
        )
        return sorted(activities, key=lambda a: a.started_at)

    @circuit(  # type: ignore[misc]
        failure_threshold=5,
        recovery_timeout=60,
        expected_exception=_TRANSIENT_ERRORS,
        name="strava_activities",
    )
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(_TRANSIENT_ERRORS),
        reraise=True,
    )
    async def _get_page(
        self, access_token: str, params: Dict[str, Any]
    ) -> List[Dict[str, Any]]:
        if not self._session:
            raise RuntimeError("Client not initialized. Use async context manager.")

        response = await self._session.get(
            f"{self.base_url}/athlete/activities",
            params=params,
            headers={"Authorization": f"Bearer {access_token}"},
        )

        if response.status_code == 401:
            logger.warning("Strava rejected access token")
            raise ActivityProviderError("Strava access token rejected (401)")

        if response.status_code == 429 or response.status_code >= 500:
            logger.warning(
                "Strava server error",
                extra={"status": response.status_code, "page": params.get("page")},
            )
            raise StravaServerError(f"Strava returned {response.status_code}")

        if response.status_code != 200:
            raise ActivityProviderError(
                f"Strava request failed with status {response.status_code}"
            )

        data = response.json()
        if not isinstance(data, list):
            raise ActivityProviderError("Unexpected Strava response payload")
        return data

    @staticmethod
    def map_activity(item: Dict[str, Any]) -> RemoteActivity:
        """
        Convert a Strava summary activity to RemoteActivity.

        Calories: ``calories`` when present, else ``kilojoules`` using the
        usual cycling approximation of 1 kJ mechanical work ≈ 1 kcal burned.
        """
        calories: Optional[int] = None
        if item.get("calories") is not None:
            calories = round_half_up(Decimal(str(item["calories"])))
        elif item.get("kilojoules") is not None:
            calories = round_half_up(Decimal(str(item["kilojoules"])))

        distance = item.get("distance")
        return RemoteActivity(
            external_id=str(item["id"]),
            activity_type=item.get("sport_type") or item.get("type") or "Workout",
            name=item.get("name"),
            started_at=_parse_local_time(item.get("start_date_local") or item["start_date"]),
            duration_s=int(item.get("moving_time") or item.get("elapsed_time") or 0),
            distance_m=Decimal(str(distance)) if distance is not None else None,
            calories=calories,
        )


def _parse_local_time(value: str) -> datetime:
    # Strava suffixes local times with "Z" although they carry no offset
    return datetime.fromisoformat(value.replace("Z", ""))
