"""Decimal helpers shared by calculations and aggregation."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..exceptions.domain_errors import InvalidInputError

Number = Union[int, float, str, Decimal]

_ONE = Decimal(1)


def as_decimal(value: Number, field: str) -> Decimal:
    """Convert a numeric input to Decimal without binary float artefacts.

    Floats go through ``str`` so that ``70.1`` becomes ``Decimal("70.1")``
    rather than its binary expansion.

    Raises:
        InvalidInputError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidInputError(f"{field} must be a number, got {value!r}") from e
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}")
    return result


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero.

    Example:
        >>> round_half_up(Decimal("2555.5"))
        2556
    """
    return int(value.quantize(_ONE, rounding=ROUND_HALF_UP))
