"""ActivityCalorieEstimator - calories for sessions reported without them."""

from decimal import Decimal
from typing import Optional

from ..core.value_objects.decimals import Number, as_decimal, round_half_up

DEFAULT_WEIGHT_KG = Decimal(70)

# Compendium of Physical Activities, typical intensity per sport.
# Keys are lower-cased provider activity types.
_MET_BY_ACTIVITY = {
    "run": Decimal("9.8"),
    "trailrun": Decimal("10.0"),
    "virtualrun": Decimal("9.8"),
    "ride": Decimal("7.5"),
    "virtualride": Decimal("7.0"),
    "ebikeride": Decimal("4.0"),
    "mountainbikeride": Decimal("8.5"),
    "gravelride": Decimal("8.0"),
    "swim": Decimal("7.0"),
    "walk": Decimal("3.5"),
    "hike": Decimal("6.0"),
    "rowing": Decimal("7.0"),
    "elliptical": Decimal("5.0"),
    "stairstepper": Decimal("9.0"),
    "weighttraining": Decimal("5.0"),
    "crossfit": Decimal("8.0"),
    "yoga": Decimal("2.5"),
    "workout": Decimal("5.0"),
    "alpineski": Decimal("6.0"),
    "nordicski": Decimal("9.0"),
    "soccer": Decimal("7.0"),
    "tennis": Decimal("7.3"),
}
_DEFAULT_MET = Decimal("5.0")
_SECONDS_PER_HOUR = Decimal(3600)


class ActivityCalorieEstimator:
    """Estimate exercise calories with MET values.

    Formula:
        kcal = MET × weight(kg) × duration(h)

    1 MET is the resting metabolic rate (3.5 ml O2/kg/min). Unknown
    activity types use a moderate-intensity MET of 5.0.
    """

    def __init__(self, default_weight_kg: Number = DEFAULT_WEIGHT_KG):
        self._default_weight = as_decimal(default_weight_kg, "default_weight_kg")

    @staticmethod
    def met_for(activity_type: str) -> Decimal:
        """MET value for a provider activity type."""
        key = activity_type.replace("_", "").replace(" ", "").lower()
        return _MET_BY_ACTIVITY.get(key, _DEFAULT_MET)

    def estimate(
        self,
        activity_type: str,
        duration_s: int,
        weight_kg: Optional[Decimal] = None,
    ) -> int:
        """Estimated kcal for a session, rounded to a whole number."""
        if duration_s <= 0:
            return 0
        weight = self._default_weight if weight_kg is None else weight_kg
        hours = Decimal(duration_s) / _SECONDS_PER_HOUR
        return round_half_up(self.met_for(activity_type) * weight * hours)
