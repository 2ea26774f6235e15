"""Unit tests for energy balance entities."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from domain.energy_balance.core.entities import (
    ActivityEntry,
    DailyEnergyBalance,
    DailyEnergyBalanceDraft,
    FoodLogEntry,
    UserProfile,
)
from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError
from domain.energy_balance.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    ActivitySource,
    BiologicalSex,
    MealType,
)


def _complete_profile() -> UserProfile:
    return UserProfile(
        user_id="user123",
        weight_kg=Decimal(70),
        height_cm=Decimal(175),
        age=30,
        sex=BiologicalSex.MALE,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
    )


class TestUserProfile:
    """Test UserProfile invariants."""

    def test_create_is_empty(self):
        profile = UserProfile.create("user123")

        assert profile.user_id == "user123"
        assert profile.has_physical_inputs() is False
        assert profile.bmr is None
        assert profile.tdee is None

    def test_empty_user_id_rejected(self):
        with pytest.raises(InvalidInputError):
            UserProfile.create("  ")

    def test_string_inputs_are_parsed(self):
        profile = UserProfile(
            user_id="u", weight_kg="70.5", sex="female", activity_level="sedentary"
        )

        assert profile.weight_kg == Decimal("70.5")
        assert profile.sex is BiologicalSex.FEMALE
        assert profile.activity_level is ActivityLevel.SEDENTARY

    @pytest.mark.parametrize("age", [0, 150, -3])
    def test_age_out_of_range(self, age):
        with pytest.raises(InvalidInputError, match="age"):
            UserProfile(user_id="u", age=age)

    def test_non_positive_weight(self):
        with pytest.raises(InvalidInputError, match="weight_kg must be positive"):
            UserProfile(user_id="u", weight_kg=0)

    def test_metrics_require_complete_inputs(self):
        with pytest.raises(InvalidInputError, match="require weight"):
            UserProfile(user_id="u", weight_kg=70, bmr=BMR(Decimal(1600)))

    def test_metrics_must_be_set_together(self):
        profile = _complete_profile()
        with pytest.raises(InvalidInputError, match="both be set"):
            profile.apply_metrics(BMR(Decimal(1600)), None)

    def test_complete_profile_requires_metrics(self):
        profile = _complete_profile()

        with pytest.raises(InvalidInputError, match="both be set"):
            profile.apply_metrics(None, None)
        with pytest.raises(InvalidInputError, match="both be set"):
            profile.check_metrics()

        profile.apply_metrics(BMR(Decimal("1648.75")), TDEE(Decimal("2555.5625")))
        profile.check_metrics()

    def test_incomplete_profile_without_metrics_is_consistent(self):
        UserProfile(user_id="u", weight_kg=70).check_metrics()

    def test_update_returns_changed_fields_only(self):
        profile = _complete_profile()

        changed = profile.update_physical_inputs(weight_kg=70, age=31)

        assert changed == ["age"]
        assert profile.age == 31

    def test_update_with_nothing_changed_keeps_timestamp(self):
        profile = _complete_profile()
        before = profile.updated_at

        assert profile.update_physical_inputs(sex="male") == []
        assert profile.updated_at == before

    def test_baseline_burn_prefers_tdee(self):
        profile = _complete_profile()
        profile.apply_metrics(BMR(Decimal("1648.75")), TDEE(Decimal("2555.5625")))

        assert profile.baseline_burn(Decimal(2000)) == Decimal("2555.5625")

    def test_baseline_burn_fallback(self):
        assert UserProfile.create("u").baseline_burn(Decimal(2000)) == Decimal(2000)


class TestFoodLogEntry:
    """Test FoodLogEntry validation and totals."""

    def test_totals_scale_with_servings(self):
        entry = FoodLogEntry.create(
            user_id="user123",
            food_name="Oatmeal",
            calories=150,
            protein=5,
            carbs="27.5",
            fat=3,
            consumed_at=datetime(2024, 1, 15, 8, 0),
            servings="1.5",
        )

        assert entry.total_calories == Decimal("225.0")
        assert entry.total_protein == Decimal("7.5")
        assert entry.total_carbs == Decimal("41.25")
        assert entry.total_fat == Decimal("4.5")
        assert entry.log_date == date(2024, 1, 15)

    def test_meal_type_parsed(self):
        entry = FoodLogEntry.create(
            user_id="u",
            food_name="Toast",
            calories=80,
            protein=3,
            carbs=15,
            fat=1,
            consumed_at=datetime(2024, 1, 15, 8, 0),
            meal_type="Breakfast",
        )
        assert entry.meal_type is MealType.BREAKFAST

    def test_offset_dropped_keeping_wall_clock(self):
        entry = FoodLogEntry.create(
            user_id="u",
            food_name="Pasta",
            calories=400,
            protein=14,
            carbs=75,
            fat=4,
            consumed_at=datetime(2024, 1, 15, 23, 30, tzinfo=timezone(timedelta(hours=2))),
        )

        assert entry.consumed_at == datetime(2024, 1, 15, 23, 30)
        assert entry.log_date == date(2024, 1, 15)

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"calories": -1}, "calories must be non-negative"),
            ({"calories": 10.5}, "calories must be an integer"),
            ({"protein": -2}, "protein must be non-negative"),
            ({"servings": 0}, "servings must be positive"),
            ({"food_name": ""}, "Food name cannot be empty"),
            ({"meal_type": "brunch"}, "Unknown meal type"),
            ({"consumed_at": "2024-01-15"}, "consumed_at must be a datetime"),
        ],
    )
    def test_invalid_values(self, overrides, message):
        values = dict(
            user_id="u",
            food_name="Apple",
            calories=95,
            protein=0,
            carbs=25,
            fat=0,
            consumed_at=datetime(2024, 1, 15, 12, 0),
        )
        values.update(overrides)
        with pytest.raises(InvalidInputError, match=message):
            FoodLogEntry.create(**values)


class TestActivityEntry:
    def test_create(self):
        entry = ActivityEntry.create(
            user_id="user123",
            external_id=12345,
            activity_type="Run",
            calories=400,
            duration_s=1800,
            started_at=datetime(2024, 1, 15, 23, 30),
            distance_m=5000,
        )

        assert entry.external_id == "12345"
        assert entry.distance_m == Decimal(5000)
        assert entry.source is ActivitySource.STRAVA
        assert entry.log_date == date(2024, 1, 15)

    @pytest.mark.parametrize("field", ["calories", "duration_s"])
    def test_negative_values_rejected(self, field):
        values = dict(
            entry_id=uuid4(),
            user_id="u",
            external_id="1",
            activity_type="Ride",
            calories=100,
            duration_s=600,
            started_at=datetime(2024, 1, 15, 7, 0),
        )
        values[field] = -1
        with pytest.raises(InvalidInputError, match=field):
            ActivityEntry(**values)


class TestDailyEnergyBalance:
    """Test derived totals and row conversion."""

    def _draft(self) -> DailyEnergyBalanceDraft:
        return DailyEnergyBalanceDraft(
            user_id="user123",
            date=date(2024, 1, 15),
            calories_consumed=1200,
            protein_consumed=Decimal("80.5"),
            carbs_consumed=Decimal(150),
            fat_consumed=Decimal(40),
            calories_burned_baseline=2556,
            calories_burned_exercise=500,
        )

    def test_derived_totals(self):
        draft = self._draft()

        assert draft.total_burned == 3056
        assert draft.net_calories == -1856

    def test_from_draft_and_back(self):
        stamp = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        row = DailyEnergyBalance.from_draft(self._draft(), updated_at=stamp)

        assert row.updated_at == stamp
        assert row.key == ("user123", date(2024, 1, 15))
        assert row.to_draft() == self._draft()

    def test_rows_are_immutable(self):
        row = DailyEnergyBalance.from_draft(self._draft())
        with pytest.raises(AttributeError):
            row.calories_consumed = 0  # type: ignore[misc]
