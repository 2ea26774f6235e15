"""ActivityLevel value object - physical activity level for TDEE."""

from decimal import Decimal
from enum import Enum
from typing import Union

from ..exceptions.domain_errors import InvalidInputError


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @classmethod
    def parse(cls, value: Union["ActivityLevel", str]) -> "ActivityLevel":
        """Parse an activity level, rejecting unknown categories.

        Raises:
            InvalidInputError: If value is not one of the five tiers
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidInputError(f"Unknown activity level: {value!r}") from e

    def pal_multiplier(self) -> Decimal:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            Decimal: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.pal_multiplier()
            Decimal('1.55')
        """
        return _PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days/week",
            ActivityLevel.VERY_ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.EXTRA_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]


_PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: Decimal("1.2"),
    ActivityLevel.LIGHTLY_ACTIVE: Decimal("1.375"),
    ActivityLevel.MODERATELY_ACTIVE: Decimal("1.55"),
    ActivityLevel.VERY_ACTIVE: Decimal("1.725"),
    ActivityLevel.EXTRA_ACTIVE: Decimal("1.9"),
}
