"""SummaryController - keeps stored daily energy balances in sync."""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from domain.energy_balance.aggregation.aggregator import EnergyBalanceAggregator
from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.exceptions.domain_errors import (
    InvalidInputError,
    PersistenceError,
)
from domain.energy_balance.core.ports.summary_repository import ISummaryRepository
from infrastructure.concurrency.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_WINDOW_DAYS = 30


class SummaryController:
    """
    Single recompute path for stored DailyEnergyBalance rows.

    Every change to an input (food entry, activity, profile) ends in one or
    more calls to :meth:`upsert`, which aggregates the day and replaces the
    stored row whole.

    Per-key state: a row is absent until the first successful upsert and
    stays present afterwards. Rows are never deleted, even when every
    ledger entry for the day is removed (the row then holds zeros).

    When a ``key_lock`` is given, upserts of the same (user, date) run one
    at a time in this process; different keys never wait on each other.
    """

    def __init__(
        self,
        aggregator: EnergyBalanceAggregator,
        summary_repository: ISummaryRepository,
        key_lock: Optional[KeyedLock] = None,
        clock: Optional[Callable[[], date]] = None,
        profile_window_days: int = DEFAULT_PROFILE_WINDOW_DAYS,
    ):
        """
        Initialize controller.

        Args:
            aggregator: Computes a day's balance from the ledgers
            summary_repository: Stores daily balance rows
            key_lock: Optional per-(user, date) lock
            clock: Returns "today" (default: date.today)
            profile_window_days: Days before today recomputed on profile change
        """
        if profile_window_days < 0:
            raise InvalidInputError("profile_window_days must be >= 0")
        self._aggregator = aggregator
        self._repository = summary_repository
        self._lock = key_lock
        self._today = clock or date.today
        self._window_days = profile_window_days

    async def upsert(self, user_id: str, day: date) -> DailyEnergyBalance:
        """
        Recompute and store the balance of ``user_id`` on ``day``.

        Returns:
            The stored row

        Raises:
            UnknownUserError: If the user has no profile
            AggregationReadError: If a ledger read fails (nothing written)
            PersistenceError: If the write fails (previous row untouched)
        """
        if self._lock is None:
            return await self._upsert(user_id, day)
        async with self._lock.acquire((user_id, day)):
            return await self._upsert(user_id, day)

    async def _upsert(self, user_id: str, day: date) -> DailyEnergyBalance:
        draft = await self._aggregator.aggregate(user_id, day)
        row = DailyEnergyBalance.from_draft(draft, updated_at=datetime.now(timezone.utc))

        try:
            await self._repository.put(row)
        except Exception as e:
            logger.error(
                "energy_balance.persist_failed",
                extra={"user_id": user_id, "date": day.isoformat(), "error": str(e)},
            )
            raise PersistenceError(user_id, day.isoformat()) from e

        logger.info(
            "energy_balance.upserted",
            extra={
                "user_id": user_id,
                "date": day.isoformat(),
                "calories_consumed": row.calories_consumed,
                "total_burned": row.total_burned,
                "net_calories": row.net_calories,
            },
        )
        return row

    async def recompute_for_food_change(
        self, user_id: str, affected_date: date
    ) -> DailyEnergyBalance:
        """Recompute after a food entry on ``affected_date`` was added/changed/removed."""
        return await self.upsert(user_id, affected_date)

    async def recompute_for_activity_change(
        self, user_id: str, affected_dates: Iterable[date]
    ) -> List[DailyEnergyBalance]:
        """
        Recompute every distinct affected date, ascending.

        Stops at the first failure; dates already processed keep their
        fresh rows.
        """
        rows = []
        for day in sorted(set(affected_dates)):
            rows.append(await self.upsert(user_id, day))
        return rows

    async def recompute_for_profile_change(
        self, user_id: str, window_days: Optional[int] = None
    ) -> List[DailyEnergyBalance]:
        """
        Recompute ``[today - window_days, today]`` after a baseline change.

        The window is inclusive on both ends, so ``window_days + 1`` dates
        are recomputed, oldest first.
        """
        window = self._window_days if window_days is None else window_days
        if window < 0:
            raise InvalidInputError(f"window_days must be >= 0, got {window}")

        today = self._today()
        start = today - timedelta(days=window)
        logger.info(
            "energy_balance.profile_recompute",
            extra={"user_id": user_id, "start": start.isoformat(), "end": today.isoformat()},
        )
        return [
            await self.upsert(user_id, start + timedelta(days=offset))
            for offset in range(window + 1)
        ]

    async def fetch(self, user_id: str, day: date) -> Optional[DailyEnergyBalance]:
        """Stored row for ``day``, or None when it was never computed."""
        return await self._repository.get(user_id, day)

    async def fetch_range(
        self, user_id: str, start: date, end: date
    ) -> List[DailyEnergyBalance]:
        """
        Stored rows in ``[start, end]``, ascending by date.

        Dates that were never computed are omitted, not zero-filled.

        Raises:
            InvalidInputError: If start is after end
        """
        if start > end:
            raise InvalidInputError(
                f"start date {start.isoformat()} is after end date {end.isoformat()}"
            )
        return await self._repository.get_range(user_id, start, end)
