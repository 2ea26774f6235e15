"""MetabolicCalculator - BMR and TDEE for a user profile."""

from dataclasses import dataclass
from typing import Optional

from ..core.entities.user_profile import UserProfile
from ..core.ports.calculators import IBMRCalculator, ITDEECalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE
from .bmr_service import BMRService
from .tdee_service import TDEEService


@dataclass(frozen=True)
class MetabolicMetrics:
    """Derived metabolic figures for one profile."""

    bmr: BMR
    tdee: TDEE


class MetabolicCalculator:
    """Composes BMR and TDEE calculation.

    Stateless; safe to share between tasks.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
    ):
        self._bmr = bmr_calculator or BMRService()
        self._tdee = tdee_calculator or TDEEService()

    def compute_bmr(self, weight_kg, height_cm, age, sex) -> BMR:
        return self._bmr.compute_bmr(weight_kg, height_cm, age, sex)

    def compute_tdee(self, bmr: BMR, activity_level) -> TDEE:
        return self._tdee.compute_tdee(bmr, activity_level)

    def compute_metrics(self, profile: UserProfile) -> Optional[MetabolicMetrics]:
        """Compute BMR/TDEE for a profile.

        Returns:
            MetabolicMetrics, or None when any physical input is missing
        """
        if not profile.has_physical_inputs():
            return None
        bmr = self.compute_bmr(
            profile.weight_kg, profile.height_cm, profile.age, profile.sex
        )
        tdee = self.compute_tdee(bmr, profile.activity_level)
        return MetabolicMetrics(bmr=bmr, tdee=tdee)
