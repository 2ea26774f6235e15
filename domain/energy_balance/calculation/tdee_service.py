"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - sedentary: 1.2
        - lightly_active: 1.375
        - moderately_active: 1.55
        - very_active: 1.725
        - extra_active: 1.9

    Unknown categories are rejected rather than defaulted.
    """

    def compute_tdee(
        self, bmr: BMR, activity_level: Union[ActivityLevel, str]
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Raises:
            InvalidInputError: If the activity level is not recognized

        Example:
            >>> TDEEService().compute_tdee(BMR(Decimal("1648.75")), "moderately_active").value
            Decimal('2555.5625')
        """
        level = ActivityLevel.parse(activity_level)
        return TDEE(value=bmr.value * level.pal_multiplier())
