"""DailyEnergyBalance entity - derived aggregate for one (user, date)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class DailyEnergyBalanceDraft:
    """Freshly aggregated totals for one user on one calendar date.

    ``total_burned`` and ``net_calories`` are derived on read, so they can
    never disagree with the stored components.

    Attributes:
        user_id: Owning user
        date: Calendar date
        calories_consumed: Σ food calories × servings, rounded
        protein_consumed: Σ protein × servings (g)
        carbs_consumed: Σ carbs × servings (g)
        fat_consumed: Σ fat × servings (g)
        calories_burned_baseline: TDEE/BMR/fallback, rounded
        calories_burned_exercise: Σ activity calories
    """

    user_id: str
    date: date
    calories_consumed: int
    protein_consumed: Decimal
    carbs_consumed: Decimal
    fat_consumed: Decimal
    calories_burned_baseline: int
    calories_burned_exercise: int

    @property
    def total_burned(self) -> int:
        """Baseline plus exercise burn."""
        return self.calories_burned_baseline + self.calories_burned_exercise

    @property
    def net_calories(self) -> int:
        """Consumed minus total burned; negative means a deficit."""
        return self.calories_consumed - self.total_burned


@dataclass(frozen=True)
class DailyEnergyBalance(DailyEnergyBalanceDraft):
    """Stored daily energy balance row, keyed by (user_id, date).

    Rows are only ever replaced whole: there is no partial update.
    """

    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def key(self) -> tuple[str, date]:
        return self.user_id, self.date

    @staticmethod
    def from_draft(
        draft: DailyEnergyBalanceDraft, updated_at: Optional[datetime] = None
    ) -> "DailyEnergyBalance":
        """Build the row to store from an aggregation draft."""
        values = {f.name: getattr(draft, f.name) for f in fields(DailyEnergyBalanceDraft)}
        if updated_at is not None:
            values["updated_at"] = updated_at
        return DailyEnergyBalance(**values)

    def to_draft(self) -> DailyEnergyBalanceDraft:
        """Drop storage metadata, keeping only aggregated values."""
        return DailyEnergyBalanceDraft(
            **{f.name: getattr(self, f.name) for f in fields(DailyEnergyBalanceDraft)}
        )
