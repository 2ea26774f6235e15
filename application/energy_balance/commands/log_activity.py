"""LogActivityCommand - record a manual exercise session."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.energy_balance.activity.calorie_estimator import ActivityCalorieEstimator
from domain.energy_balance.core.entities.activity_entry import ActivityEntry
from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.activity_source import ActivitySource
from domain.energy_balance.core.value_objects.decimals import Number, as_decimal

from ..orchestrators.summary_controller import SummaryController


@dataclass(frozen=True)
class LogActivityCommand:
    """Command to log an exercise session by hand.

    ``calories`` may be omitted; it is then estimated from the activity
    type, duration and the user's weight.
    """

    user_id: str
    activity_type: str
    duration_s: int
    started_at: datetime
    calories: Optional[int] = None
    distance_m: Optional[Number] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class LogActivityResult:
    entry: ActivityEntry
    balance: DailyEnergyBalance


class LogActivityHandler:
    """Handler for LogActivityCommand."""

    def __init__(
        self,
        activity_ledger: IActivityLedger,
        profile_store: IProfileStore,
        controller: SummaryController,
        estimator: Optional[ActivityCalorieEstimator] = None,
    ):
        self._activities = activity_ledger
        self._profiles = profile_store
        self._controller = controller
        self._estimator = estimator or ActivityCalorieEstimator()

    async def handle(self, command: LogActivityCommand) -> LogActivityResult:
        profile = await self._profiles.get_profile(command.user_id)

        calories = command.calories
        if calories is None:
            calories = self._estimator.estimate(
                command.activity_type, command.duration_s, profile.weight_kg
            )

        entry = ActivityEntry.create(
            user_id=command.user_id,
            external_id=f"manual:{uuid4()}",
            activity_type=command.activity_type,
            calories=calories,
            duration_s=command.duration_s,
            started_at=command.started_at,
            distance_m=(
                None
                if command.distance_m is None
                else as_decimal(command.distance_m, "distance_m")
            ),
            name=command.name,
            source=ActivitySource.MANUAL,
        )
        stored, _ = await self._activities.upsert_by_external_id(entry)
        rows = await self._controller.recompute_for_activity_change(
            stored.user_id, [stored.log_date]
        )
        return LogActivityResult(entry=stored, balance=rows[0])
