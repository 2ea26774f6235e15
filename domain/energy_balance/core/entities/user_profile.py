"""UserProfile entity - physical and metabolic inputs of one account."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Union

from ..exceptions.domain_errors import InvalidInputError
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biological_sex import BiologicalSex
from ..value_objects.bmr import BMR
from ..value_objects.decimals import Number, as_decimal
from ..value_objects.tdee import TDEE

PHYSICAL_FIELDS = ("weight_kg", "height_cm", "age", "sex", "activity_level")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserProfile:
    """Physical inputs and derived metabolic figures for one user.

    The profile is created empty at sign-up; physical inputs are filled in
    as the user edits them. BMR and TDEE are never set by the user: they
    are derived, and present if and only if all five physical inputs are
    present. A freshly built complete profile may briefly lack them until
    :meth:`apply_metrics` runs; stores refuse to write it in that state.

    Attributes:
        user_id: Opaque user key
        weight_kg: Body weight in kg (> 0)
        height_cm: Height in cm (> 0)
        age: Age in years (1-149)
        sex: Biological sex category (BMR offset only)
        activity_level: One of the five PAL tiers
        bmr: Derived basal metabolic rate
        tdee: Derived total daily energy expenditure
    """

    user_id: str
    weight_kg: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None
    age: Optional[int] = None
    sex: Optional[BiologicalSex] = None
    activity_level: Optional[ActivityLevel] = None
    bmr: Optional[BMR] = None
    tdee: Optional[TDEE] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidInputError("User ID cannot be empty")
        if self.weight_kg is not None:
            self.weight_kg = _positive(self.weight_kg, "weight_kg")
        if self.height_cm is not None:
            self.height_cm = _positive(self.height_cm, "height_cm")
        if self.age is not None:
            self.age = _valid_age(self.age)
        if self.sex is not None:
            self.sex = BiologicalSex.parse(self.sex)
        if self.activity_level is not None:
            self.activity_level = ActivityLevel.parse(self.activity_level)
        if self.bmr is not None or self.tdee is not None:
            self._check_metrics(self.bmr, self.tdee)

    @staticmethod
    def create(user_id: str) -> "UserProfile":
        """Create the empty profile attached to a new account."""
        return UserProfile(user_id=user_id)

    def has_physical_inputs(self) -> bool:
        """True when every input needed for BMR/TDEE is present."""
        return all(getattr(self, name) is not None for name in PHYSICAL_FIELDS)

    def update_physical_inputs(
        self,
        weight_kg: Optional[Number] = None,
        height_cm: Optional[Number] = None,
        age: Optional[int] = None,
        sex: Optional[Union[BiologicalSex, str]] = None,
        activity_level: Optional[Union[ActivityLevel, str]] = None,
    ) -> list[str]:
        """Apply changed physical inputs; ``None`` leaves a field as is.

        Derived metrics are not touched here. The caller recomputes them
        and passes the result to :meth:`apply_metrics`.

        Returns:
            Names of the fields whose value actually changed

        Raises:
            InvalidInputError: If any provided value is out of range
        """
        candidates = {
            "weight_kg": None if weight_kg is None else _positive(weight_kg, "weight_kg"),
            "height_cm": None if height_cm is None else _positive(height_cm, "height_cm"),
            "age": None if age is None else _valid_age(age),
            "sex": None if sex is None else BiologicalSex.parse(sex),
            "activity_level": (
                None if activity_level is None else ActivityLevel.parse(activity_level)
            ),
        }

        changed = [
            name
            for name, value in candidates.items()
            if value is not None and value != getattr(self, name)
        ]
        for name in changed:
            setattr(self, name, candidates[name])
        if changed:
            self.updated_at = _utcnow()
        return changed

    def apply_metrics(self, bmr: Optional[BMR], tdee: Optional[TDEE]) -> None:
        """Store freshly derived BMR/TDEE.

        Raises:
            InvalidInputError: If presence of metrics does not match
                presence of physical inputs
        """
        self._check_metrics(bmr, tdee)
        self.bmr = bmr
        self.tdee = tdee
        self.updated_at = _utcnow()

    def baseline_burn(self, fallback: Decimal) -> Decimal:
        """Non-exercise daily burn: TDEE, else BMR, else ``fallback``."""
        if self.tdee is not None:
            return self.tdee.value
        if self.bmr is not None:
            return self.bmr.value
        return fallback

    def check_metrics(self) -> None:
        """Verify that BMR/TDEE are present exactly when all inputs are.

        Stores call this before writing, so a complete profile is never
        persisted without its derived metrics.

        Raises:
            InvalidInputError: If presence of metrics does not match
                presence of physical inputs
        """
        self._check_metrics(self.bmr, self.tdee)

    def _check_metrics(self, bmr: Optional[BMR], tdee: Optional[TDEE]) -> None:
        if self.has_physical_inputs():
            if bmr is None or tdee is None:
                raise InvalidInputError(
                    "BMR and TDEE must both be set for a complete profile"
                )
        elif bmr is not None or tdee is not None:
            raise InvalidInputError(
                "BMR/TDEE require weight, height, age, sex and activity level"
            )


def _positive(value: Number, field_name: str) -> Decimal:
    result = as_decimal(value, field_name)
    if result <= 0:
        raise InvalidInputError(f"{field_name} must be positive, got {value}")
    return result


def _valid_age(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"age must be an integer, got {value!r}")
    if not (1 <= value <= 149):
        raise InvalidInputError(f"age must be 1-149 years, got {value}")
    return value
