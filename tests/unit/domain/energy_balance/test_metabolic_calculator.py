"""Unit tests for BMR/TDEE calculation."""

from decimal import Decimal

import pytest

from domain.energy_balance.calculation import (
    BMRService,
    MetabolicCalculator,
    TDEEService,
)
from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError
from domain.energy_balance.core.value_objects import BMR, BiologicalSex


class TestBMRService:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def setup_method(self):
        self.service = BMRService()

    def test_male(self):
        bmr = self.service.compute_bmr(70, 175, 30, BiologicalSex.MALE)

        # 10*70 + 6.25*175 - 5*30 + 5
        assert bmr.value == Decimal("1648.75")

    def test_female(self):
        bmr = self.service.compute_bmr(60, 165, 25, "female")

        # 10*60 + 6.25*165 - 5*25 - 161
        assert bmr.value == Decimal("1345.25")

    def test_unspecified_sex_uses_midpoint(self):
        bmr = self.service.compute_bmr(70, 175, 30, None)

        assert bmr.value == Decimal("1565.75")

    def test_decimal_inputs_are_exact(self):
        bmr = self.service.compute_bmr("70.1", "175.3", 30, BiologicalSex.MALE)

        assert bmr.value == Decimal("701.0") + Decimal("1095.625") - 150 + 5

    def test_age_lowers_bmr(self):
        young = self.service.compute_bmr(70, 170, 25, BiologicalSex.MALE)
        old = self.service.compute_bmr(70, 170, 50, BiologicalSex.MALE)

        assert young.value - old.value == Decimal(125)

    @pytest.mark.parametrize(
        "weight,height,age",
        [(0, 175, 30), (70, -1, 30), (70, 175, 0), (70, 175, True)],
    )
    def test_invalid_inputs(self, weight, height, age):
        with pytest.raises(InvalidInputError):
            self.service.compute_bmr(weight, height, age, BiologicalSex.MALE)


class TestTDEEService:
    def test_moderately_active(self):
        tdee = TDEEService().compute_tdee(BMR(Decimal("1648.75")), "moderately_active")

        assert tdee.value == Decimal("2555.5625")
        assert tdee.rounded() == 2556

    def test_unknown_level(self):
        with pytest.raises(InvalidInputError, match="Unknown activity level"):
            TDEEService().compute_tdee(BMR(Decimal(1600)), "hyperactive")


class TestMetabolicCalculator:
    def test_compute_metrics_complete_profile(self):
        profile = UserProfile(
            user_id="user123",
            weight_kg=70,
            height_cm=175,
            age=30,
            sex="male",
            activity_level="moderately_active",
        )

        metrics = MetabolicCalculator().compute_metrics(profile)

        assert metrics is not None
        assert metrics.bmr.value == Decimal("1648.75")
        assert metrics.tdee.value == Decimal("2555.5625")

    def test_compute_metrics_incomplete_profile(self):
        profile = UserProfile(user_id="user123", weight_kg=70, height_cm=175)

        assert MetabolicCalculator().compute_metrics(profile) is None
