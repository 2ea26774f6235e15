"""EnergyBalanceAggregator - computes one day's energy balance."""

import logging
from datetime import date
from decimal import Decimal

from ..core.entities.daily_energy_balance import DailyEnergyBalanceDraft
from ..core.exceptions.domain_errors import AggregationReadError, UnknownUserError
from ..core.ports.activity_ledger import IActivityLedger
from ..core.ports.food_ledger import IFoodLedger
from ..core.ports.profile_store import IProfileStore
from ..core.value_objects.decimals import as_decimal, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_BASELINE_FALLBACK_KCAL = 2000


class EnergyBalanceAggregator:
    """
    Combine food intake, exercise and baseline burn for one (user, date).

    Flow:
    1. Load the user's profile (baseline burn: TDEE, else BMR, else fallback)
    2. Read the day's food entries and sum calories/macros × servings
    3. Read the day's activity entries and sum calories
    4. Return an immutable draft; nothing is persisted here

    Reads only, so calling it repeatedly on unchanged ledgers returns equal
    drafts.
    """

    def __init__(
        self,
        profile_store: IProfileStore,
        food_ledger: IFoodLedger,
        activity_ledger: IActivityLedger,
        baseline_fallback_kcal: int = DEFAULT_BASELINE_FALLBACK_KCAL,
    ):
        self._profiles = profile_store
        self._food = food_ledger
        self._activities = activity_ledger
        self._fallback = as_decimal(baseline_fallback_kcal, "baseline_fallback_kcal")

    async def aggregate(self, user_id: str, day: date) -> DailyEnergyBalanceDraft:
        """
        Aggregate the energy balance of ``user_id`` on ``day``.

        Raises:
            UnknownUserError: If the user has no profile
            AggregationReadError: If any profile or ledger read fails
        """
        try:
            profile = await self._profiles.get_profile(user_id)
        except UnknownUserError:
            raise
        except Exception as e:
            logger.error(
                "Profile read failed during aggregation",
                extra={"user_id": user_id, "date": day.isoformat(), "error": str(e)},
            )
            raise AggregationReadError(user_id, day.isoformat(), "profile") from e

        try:
            food_entries = await self._food.list_for_date(user_id, day)
        except Exception as e:
            logger.error(
                "Food ledger read failed during aggregation",
                extra={"user_id": user_id, "date": day.isoformat(), "error": str(e)},
            )
            raise AggregationReadError(user_id, day.isoformat(), "food_log") from e

        try:
            activities = await self._activities.list_for_date(user_id, day)
        except Exception as e:
            logger.error(
                "Activity ledger read failed during aggregation",
                extra={"user_id": user_id, "date": day.isoformat(), "error": str(e)},
            )
            raise AggregationReadError(user_id, day.isoformat(), "activities") from e

        calories = sum((e.total_calories for e in food_entries), Decimal(0))
        protein = sum((e.total_protein for e in food_entries), Decimal(0))
        carbs = sum((e.total_carbs for e in food_entries), Decimal(0))
        fat = sum((e.total_fat for e in food_entries), Decimal(0))
        exercise = sum(a.calories for a in activities)

        draft = DailyEnergyBalanceDraft(
            user_id=user_id,
            date=day,
            calories_consumed=round_half_up(calories),
            protein_consumed=protein,
            carbs_consumed=carbs,
            fat_consumed=fat,
            calories_burned_baseline=round_half_up(profile.baseline_burn(self._fallback)),
            calories_burned_exercise=exercise,
        )

        logger.debug(
            "Energy balance aggregated",
            extra={
                "user_id": user_id,
                "date": day.isoformat(),
                "food_entries": len(food_entries),
                "activities": len(activities),
                "net_calories": draft.net_calories,
            },
        )
        return draft
