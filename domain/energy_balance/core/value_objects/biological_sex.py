"""BiologicalSex value object - used only for the BMR offset."""

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from ..exceptions.domain_errors import InvalidInputError


class BiologicalSex(str, Enum):
    """Biological sex category for the Mifflin-St Jeor offset."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Union["BiologicalSex", str]) -> "BiologicalSex":
        """Parse a sex category.

        Raises:
            InvalidInputError: If value is not a known category
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidInputError(f"Unknown sex category: {value!r}") from e

    @staticmethod
    def bmr_offset(sex: Optional["BiologicalSex"]) -> Decimal:
        """Get the Mifflin-St Jeor constant for a sex category.

        Male +5, female -161. Any other or unspecified category gets -78,
        the midpoint of the two published offsets.
        """
        if sex is BiologicalSex.MALE:
            return Decimal(5)
        if sex is BiologicalSex.FEMALE:
            return Decimal(-161)
        return Decimal(-78)
