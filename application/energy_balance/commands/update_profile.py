"""UpdateProfileCommand - change physical inputs of a profile."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from domain.energy_balance.calculation.metabolic_calculator import MetabolicCalculator
from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.activity_level import ActivityLevel
from domain.energy_balance.core.value_objects.biological_sex import BiologicalSex
from domain.energy_balance.core.value_objects.decimals import Number

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Command to update physical inputs of a profile.

    Fields left as None are not changed.

    Note: At least one field must be provided.
    """

    user_id: str
    weight_kg: Optional[Number] = None
    height_cm: Optional[Number] = None
    age: Optional[int] = None
    sex: Optional[Union[BiologicalSex, str]] = None
    activity_level: Optional[Union[ActivityLevel, str]] = None

    def __post_init__(self) -> None:
        """Validate command has at least one update."""
        if all(
            value is None
            for value in (
                self.weight_kg,
                self.height_cm,
                self.age,
                self.sex,
                self.activity_level,
            )
        ):
            raise InvalidInputError("At least one field must be provided for update")


@dataclass(frozen=True)
class UpdateProfileResult:
    """Result of profile update.

    Attributes:
        profile: Updated profile
        changed_fields: Physical inputs whose value changed
        baseline_changed: Whether the baseline burn changed
        recomputed: Daily balances recomputed because of the change
    """

    profile: UserProfile
    changed_fields: List[str]
    baseline_changed: bool
    recomputed: List[DailyEnergyBalance] = field(default_factory=list)


class UpdateProfileHandler:
    """Handler for UpdateProfileCommand.

    Updates a profile by:
    1. Loading profile from the store
    2. Applying changed physical inputs
    3. Recomputing BMR/TDEE (cleared while inputs are incomplete)
    4. Persisting profile and derived metrics
    5. Recomputing the recent window when the baseline burn changed
    """

    def __init__(
        self,
        profile_store: IProfileStore,
        calculator: MetabolicCalculator,
        controller: SummaryController,
    ):
        self._profiles = profile_store
        self._calculator = calculator
        self._controller = controller

    async def handle(self, command: UpdateProfileCommand) -> UpdateProfileResult:
        """
        Handle profile update command.

        Raises:
            UnknownUserError: If the user has no profile
            InvalidInputError: If any physical input is out of range
        """
        profile = await self._profiles.get_profile(command.user_id)
        previous_baseline = _baseline(profile)

        changed = profile.update_physical_inputs(
            weight_kg=command.weight_kg,
            height_cm=command.height_cm,
            age=command.age,
            sex=command.sex,
            activity_level=command.activity_level,
        )
        if not changed:
            return UpdateProfileResult(
                profile=profile, changed_fields=[], baseline_changed=False
            )

        metrics = self._calculator.compute_metrics(profile)
        if metrics is None:
            profile.apply_metrics(None, None)
        else:
            profile.apply_metrics(metrics.bmr, metrics.tdee)

        await self._profiles.save(profile)
        await self._profiles.save_derived_metabolics(
            profile.user_id, profile.bmr, profile.tdee
        )

        baseline_changed = _baseline(profile) != previous_baseline
        logger.info(
            "Profile updated",
            extra={
                "user_id": profile.user_id,
                "changed_fields": changed,
                "baseline_changed": baseline_changed,
            },
        )

        recomputed: List[DailyEnergyBalance] = []
        if baseline_changed:
            recomputed = await self._controller.recompute_for_profile_change(
                profile.user_id
            )

        return UpdateProfileResult(
            profile=profile,
            changed_fields=changed,
            baseline_changed=baseline_changed,
            recomputed=recomputed,
        )


def _baseline(profile: UserProfile) -> Optional[int]:
    # Stored rows carry the rounded figure, so compare rounded values
    if profile.tdee is not None:
        return profile.tdee.rounded()
    if profile.bmr is not None:
        return profile.bmr.rounded()
    return None
