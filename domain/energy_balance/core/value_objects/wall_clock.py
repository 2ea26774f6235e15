"""Wall-clock normalization for ledger timestamps."""

from datetime import datetime

from ..exceptions.domain_errors import InvalidInputError


def as_wall_clock(moment: datetime, field: str) -> datetime:
    """Return ``moment`` as a naive local wall-clock time.

    An aware value keeps its own local reading and drops the offset, so
    ``2024-01-15T23:30+02:00`` stays on the 15th. Ledgers then hold only
    naive values, which sort against each other.

    Raises:
        InvalidInputError: If moment is not a datetime
    """
    if not isinstance(moment, datetime):
        raise InvalidInputError(f"{field} must be a datetime, got {moment!r}")
    return moment.replace(tzinfo=None) if moment.tzinfo is not None else moment
