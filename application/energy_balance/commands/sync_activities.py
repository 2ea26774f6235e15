"""SyncActivitiesCommand - import remote exercise sessions."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Set

from domain.energy_balance.activity.calorie_estimator import ActivityCalorieEstimator
from domain.energy_balance.core.entities.activity_entry import ActivityEntry
from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger
from domain.energy_balance.core.ports.activity_provider import IActivityProvider
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.activity_source import ActivitySource

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncActivitiesCommand:
    """Command to import a user's activities from the remote provider.

    Attributes:
        user_id: Local user
        access_token: Provider bearer token (already obtained)
        after: Only import activities started after this instant
    """

    user_id: str
    access_token: str
    after: Optional[datetime] = None


@dataclass(frozen=True)
class SyncActivitiesResult:
    """Outcome of an activity sync.

    Attributes:
        inserted: Activities seen for the first time
        updated: Re-imported activities that replaced a stored one
        estimated: Activities whose calories were estimated locally
        balances: Refreshed daily balances, ascending by date
    """

    inserted: int
    updated: int
    estimated: int
    balances: List[DailyEnergyBalance] = field(default_factory=list)


class SyncActivitiesHandler:
    """Handler for SyncActivitiesCommand.

    1. Fetch activities from the provider
    2. Estimate calories where the provider reported none
    3. Upsert each by external ID, collecting every affected date
    4. Recompute all affected dates in one call
    """

    def __init__(
        self,
        provider: IActivityProvider,
        activity_ledger: IActivityLedger,
        profile_store: IProfileStore,
        controller: SummaryController,
        estimator: Optional[ActivityCalorieEstimator] = None,
    ):
        self._provider = provider
        self._activities = activity_ledger
        self._profiles = profile_store
        self._controller = controller
        self._estimator = estimator or ActivityCalorieEstimator()

    async def handle(self, command: SyncActivitiesCommand) -> SyncActivitiesResult:
        """
        Handle activity sync command.

        Raises:
            UnknownUserError: If the user has no profile
            ActivityProviderError: If the provider request fails
            InvalidInputError: If a remote activity carries invalid values;
                dates stored before the failure are still recomputed
        """
        profile = await self._profiles.get_profile(command.user_id)
        remote_activities = await self._provider.fetch_activities(
            command.access_token, after=command.after
        )

        affected: Set[date] = set()
        inserted = updated = estimated = 0
        try:
            for remote in remote_activities:
                calories = remote.calories
                if calories is None:
                    calories = self._estimator.estimate(
                        remote.activity_type, remote.duration_s, profile.weight_kg
                    )
                    estimated += 1

                entry = ActivityEntry.create(
                    user_id=command.user_id,
                    external_id=remote.external_id,
                    activity_type=remote.activity_type,
                    calories=calories,
                    duration_s=remote.duration_s,
                    started_at=remote.started_at,
                    distance_m=remote.distance_m,
                    name=remote.name,
                    source=ActivitySource.STRAVA,
                )
                stored, previous_date = await self._activities.upsert_by_external_id(entry)
                affected.add(stored.log_date)
                if previous_date is None:
                    inserted += 1
                else:
                    updated += 1
                    affected.add(previous_date)
        except Exception as e:
            # Days already written must not keep a stale balance
            logger.error(
                "Activity sync interrupted",
                extra={
                    "user_id": command.user_id,
                    "stored": inserted + updated,
                    "dates": len(affected),
                    "error": str(e),
                },
            )
            if affected:
                await self._controller.recompute_for_activity_change(
                    command.user_id, affected
                )
            raise

        logger.info(
            "Activities synced",
            extra={
                "user_id": command.user_id,
                "fetched": len(remote_activities),
                "inserted": inserted,
                "updated": updated,
                "estimated": estimated,
                "dates": len(affected),
            },
        )

        balances = await self._controller.recompute_for_activity_change(
            command.user_id, affected
        )
        return SyncActivitiesResult(
            inserted=inserted, updated=updated, estimated=estimated, balances=balances
        )
