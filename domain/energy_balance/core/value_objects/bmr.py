"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass
from decimal import Decimal

from .decimals import round_half_up


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    Attributes:
        value: BMR in kcal/day, full precision
    """

    value: Decimal

    def rounded(self) -> int:
        """BMR rounded to whole kcal (halves away from zero)."""
        return round_half_up(self.value)

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"BMR(value={self.value})"
