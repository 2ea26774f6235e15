"""Unit tests for energy balance value objects."""

from decimal import Decimal

import pytest

from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError
from domain.energy_balance.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    BiologicalSex,
    as_decimal,
    round_half_up,
)


class TestAsDecimal:
    """Test numeric input conversion."""

    def test_float_goes_through_str(self):
        assert as_decimal(70.1, "weight_kg") == Decimal("70.1")

    def test_int_and_str(self):
        assert as_decimal(175, "height_cm") == Decimal(175)
        assert as_decimal("6.25", "x") == Decimal("6.25")

    def test_rejects_bool(self):
        with pytest.raises(InvalidInputError, match="must be a number"):
            as_decimal(True, "weight_kg")

    def test_rejects_garbage(self):
        with pytest.raises(InvalidInputError, match="weight_kg must be a number"):
            as_decimal("heavy", "weight_kg")

    def test_rejects_non_finite(self):
        with pytest.raises(InvalidInputError, match="finite"):
            as_decimal(float("nan"), "weight_kg")
        with pytest.raises(InvalidInputError, match="finite"):
            as_decimal(Decimal("Infinity"), "weight_kg")


class TestRoundHalfUp:
    """Test rounding of calorie totals."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2555.5625", 2556),
            ("2555.5", 2556),
            ("2554.5", 2555),
            ("2555.4999", 2555),
            ("1648.75", 1649),
            ("-0.5", -1),
        ],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(Decimal(value)) == expected

    def test_differs_from_bankers_rounding(self):
        # round() would give 2554
        assert round(Decimal("2554.5")) == 2554
        assert round_half_up(Decimal("2554.5")) == 2555


class TestActivityLevel:
    """Test PAL tiers."""

    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, "1.2"),
            (ActivityLevel.LIGHTLY_ACTIVE, "1.375"),
            (ActivityLevel.MODERATELY_ACTIVE, "1.55"),
            (ActivityLevel.VERY_ACTIVE, "1.725"),
            (ActivityLevel.EXTRA_ACTIVE, "1.9"),
        ],
    )
    def test_pal_multipliers(self, level, multiplier):
        assert level.pal_multiplier() == Decimal(multiplier)

    def test_parse_is_case_insensitive(self):
        assert ActivityLevel.parse(" Moderately_Active ") is ActivityLevel.MODERATELY_ACTIVE

    def test_parse_passes_enum_through(self):
        assert ActivityLevel.parse(ActivityLevel.VERY_ACTIVE) is ActivityLevel.VERY_ACTIVE

    def test_unknown_level_is_rejected(self):
        with pytest.raises(InvalidInputError, match="Unknown activity level"):
            ActivityLevel.parse("couch_potato")

    def test_description(self):
        assert "3-5 days" in ActivityLevel.MODERATELY_ACTIVE.description()


class TestBiologicalSex:
    """Test BMR offsets."""

    def test_offsets(self):
        assert BiologicalSex.bmr_offset(BiologicalSex.MALE) == Decimal(5)
        assert BiologicalSex.bmr_offset(BiologicalSex.FEMALE) == Decimal(-161)
        assert BiologicalSex.bmr_offset(BiologicalSex.OTHER) == Decimal(-78)
        assert BiologicalSex.bmr_offset(None) == Decimal(-78)

    def test_parse(self):
        assert BiologicalSex.parse("FEMALE") is BiologicalSex.FEMALE

    def test_parse_unknown(self):
        with pytest.raises(InvalidInputError, match="Unknown sex category"):
            BiologicalSex.parse("x")


class TestMetabolicValues:
    def test_bmr_rounded(self):
        bmr = BMR(value=Decimal("1648.75"))
        assert bmr.rounded() == 1649
        assert str(bmr) == "1649 kcal/day"

    def test_tdee_rounded(self):
        assert TDEE(value=Decimal("2555.5625")).rounded() == 2556
