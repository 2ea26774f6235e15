"""ActivityEntry entity - one exercise session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from ..exceptions.domain_errors import InvalidInputError
from ..value_objects.activity_source import ActivitySource
from ..value_objects.decimals import as_decimal
from ..value_objects.wall_clock import as_wall_clock


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ActivityEntry:
    """Exercise session, usually imported from a remote activity provider.

    ``external_id`` is unique per user: re-importing the same external
    activity updates the existing entry instead of adding a new one.

    Attributes:
        entry_id: Unique entry identifier
        user_id: Owning user
        external_id: Identifier in the source system (deduplication key)
        activity_type: Activity category (Run, Ride, Swim, ...)
        calories: kcal burned (estimated when the source gave none)
        duration_s: Duration in seconds
        started_at: Start time as a naive wall-clock time (offset dropped)
        distance_m: Distance in meters, if any
    """

    entry_id: UUID
    user_id: str
    external_id: str
    activity_type: str
    calories: int
    duration_s: int
    started_at: datetime
    distance_m: Optional[Decimal] = None
    name: Optional[str] = None
    source: ActivitySource = ActivitySource.STRAVA
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidInputError("User ID cannot be empty")
        if not self.external_id or not str(self.external_id).strip():
            raise InvalidInputError("External ID cannot be empty")
        self.external_id = str(self.external_id)
        for name in ("calories", "duration_s"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {value}")
        if self.distance_m is not None:
            self.distance_m = as_decimal(self.distance_m, "distance_m")
            if self.distance_m < 0:
                raise InvalidInputError(
                    f"distance_m must be non-negative, got {self.distance_m}"
                )
        self.started_at = as_wall_clock(self.started_at, "started_at")
        self.source = ActivitySource(self.source)

    @staticmethod
    def create(
        user_id: str,
        external_id: str,
        activity_type: str,
        calories: int,
        duration_s: int,
        started_at: datetime,
        distance_m: Optional[Decimal] = None,
        name: Optional[str] = None,
        source: ActivitySource = ActivitySource.STRAVA,
    ) -> "ActivityEntry":
        """Create a new entry with a generated identifier."""
        return ActivityEntry(
            entry_id=uuid4(),
            user_id=user_id,
            external_id=external_id,
            activity_type=activity_type,
            calories=calories,
            duration_s=duration_s,
            started_at=started_at,
            distance_m=distance_m,
            name=name,
            source=source,
        )

    @property
    def log_date(self) -> date:
        """Calendar date the session counts towards."""
        return self.started_at.date()
