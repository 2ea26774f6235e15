"""Calculator ports - interfaces for BMR/TDEE calculations."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biological_sex import BiologicalSex
from ..value_objects.bmr import BMR
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def compute_bmr(
        self,
        weight_kg: Decimal,
        height_cm: Decimal,
        age: int,
        sex: Optional[BiologicalSex],
    ) -> BMR:
        """Calculate BMR from body measurements.

        Args:
            weight_kg: Body weight in kg (> 0)
            height_cm: Height in cm (> 0)
            age: Age in years (>= 1)
            sex: Biological sex, None when unspecified

        Returns:
            BMR: Calculated basal metabolic rate

        Raises:
            InvalidInputError: If any measurement is out of range
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def compute_tdee(
        self, bmr: BMR, activity_level: Union[ActivityLevel, str]
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure

        Raises:
            InvalidInputError: If the activity level is not recognized
        """
        pass
