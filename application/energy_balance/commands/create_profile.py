"""CreateProfileCommand - create the profile attached to a new account."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from domain.energy_balance.calculation.metabolic_calculator import MetabolicCalculator
from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import (
    ProfileAlreadyExistsError,
)
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.activity_level import ActivityLevel
from domain.energy_balance.core.value_objects.biological_sex import BiologicalSex
from domain.energy_balance.core.value_objects.decimals import Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateProfileCommand:
    """Command to create a user profile.

    Physical inputs are optional: a profile may start empty and be filled
    in later through UpdateProfileCommand.
    """

    user_id: str
    weight_kg: Optional[Number] = None
    height_cm: Optional[Number] = None
    age: Optional[int] = None
    sex: Optional[Union[BiologicalSex, str]] = None
    activity_level: Optional[Union[ActivityLevel, str]] = None


class CreateProfileHandler:
    """Handler for CreateProfileCommand.

    Creates the profile, derives BMR/TDEE when all inputs are present and
    persists it. No daily balance can exist before the profile does, so
    nothing is recomputed.
    """

    def __init__(self, profile_store: IProfileStore, calculator: MetabolicCalculator):
        self._profiles = profile_store
        self._calculator = calculator

    async def handle(self, command: CreateProfileCommand) -> UserProfile:
        """
        Handle profile creation command.

        Raises:
            ProfileAlreadyExistsError: If the user already has a profile
            InvalidInputError: If any physical input is out of range
        """
        if await self._profiles.exists(command.user_id):
            raise ProfileAlreadyExistsError(command.user_id)

        profile = UserProfile.create(command.user_id)
        profile.update_physical_inputs(
            weight_kg=command.weight_kg,
            height_cm=command.height_cm,
            age=command.age,
            sex=command.sex,
            activity_level=command.activity_level,
        )
        metrics = self._calculator.compute_metrics(profile)
        if metrics is not None:
            profile.apply_metrics(metrics.bmr, metrics.tdee)

        await self._profiles.save(profile)

        logger.info(
            "Profile created",
            extra={
                "user_id": profile.user_id,
                "has_metrics": metrics is not None,
            },
        )
        return profile
