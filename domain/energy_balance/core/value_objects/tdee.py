"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass
from decimal import Decimal

from .decimals import round_half_up


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day, full precision
    """

    value: Decimal

    def rounded(self) -> int:
        """TDEE rounded to whole kcal (halves away from zero)."""
        return round_half_up(self.value)

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"TDEE(value={self.value})"
