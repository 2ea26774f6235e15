"""BMRService - Basal Metabolic Rate calculation."""

from decimal import Decimal
from typing import Optional, Union

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biological_sex import BiologicalSex
from ..core.value_objects.bmr import BMR
from ..core.value_objects.decimals import Number, as_decimal


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:    BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women:  BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
        Other / unspecified: same base - 78

    Arithmetic is done in Decimal, so the result is exact for decimal
    inputs.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def compute_bmr(
        self,
        weight_kg: Number,
        height_cm: Number,
        age: int,
        sex: Optional[Union[BiologicalSex, str]],
    ) -> BMR:
        """Calculate BMR from body measurements.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm
            age: Age in years
            sex: Biological sex, None when unspecified

        Returns:
            BMR: Basal metabolic rate in kcal/day

        Raises:
            InvalidInputError: If weight or height <= 0 or age < 1

        Example:
            >>> BMRService().compute_bmr(70, 175, 30, BiologicalSex.MALE).value
            Decimal('1648.75')
        """
        weight = as_decimal(weight_kg, "weight_kg")
        height = as_decimal(height_cm, "height_cm")
        if weight <= 0:
            raise InvalidInputError(f"weight_kg must be positive, got {weight_kg}")
        if height <= 0:
            raise InvalidInputError(f"height_cm must be positive, got {height_cm}")
        if isinstance(age, bool) or not isinstance(age, int) or age < 1:
            raise InvalidInputError(f"age must be a positive integer, got {age!r}")

        parsed_sex = None if sex is None else BiologicalSex.parse(sex)

        # Base calculation (common for all categories)
        base = 10 * weight + Decimal("6.25") * height - 5 * age
        return BMR(value=base + BiologicalSex.bmr_offset(parsed_sex))
