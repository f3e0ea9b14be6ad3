"""Unit tests for portion and exercise-duration arithmetic."""

import pytest

from nutricoach.domain.coach.core.value_objects.enums import MacroKey
from nutricoach.domain.coach.services.portion_calculator import (
    amount_text,
    days_ago_text,
    minutes_to_burn,
    recommended_amount,
)
from nutricoach.domain.shared.rounding import format_number, round_half_up, round_one_decimal


class TestRounding:
    """Half-up rounding used for every user-facing number."""

    def test_half_rounds_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2

    def test_one_decimal(self) -> None:
        assert round_one_decimal(23.3236) == 23.3
        assert round_one_decimal(0.06) == 0.1

    def test_format_number(self) -> None:
        assert format_number(2.0) == "2"
        assert format_number(1.5) == "1.5"


class TestMinutesToBurn:
    """Test minutes needed to burn a surplus."""

    def test_formula(self) -> None:
        # 100 * 200 / (3.5 * 3.5 * 70) = 23.32...
        assert minutes_to_burn(100, 3.5, 70) == 23.3

    def test_floor_of_one_minute(self) -> None:
        assert minutes_to_burn(1, 9.8, 70) == 1.0

    @pytest.mark.parametrize("met,weight", [(0, 70), (3.5, 0), (-1, 70)])
    def test_invalid_inputs_return_one(self, met: float, weight: float) -> None:
        assert minutes_to_burn(300, met, weight) == 1.0

    def test_decreasing_in_met(self) -> None:
        minutes = [minutes_to_burn(400, met, 70) for met in (2, 3.5, 6, 9.8)]
        assert minutes == sorted(minutes, reverse=True)
        assert all(m >= 1 for m in minutes)


class TestRecommendedAmount:
    """Test portion sizing."""

    def test_grams_for_target(self, chicken) -> None:
        # 90 g gap * 0.7 = 63 g protein -> 63 * 100 / 31
        assert recommended_amount(chicken, MacroKey.PROTEIN, 63) == 203

    def test_calorie_cap(self, chicken) -> None:
        # 203 g of chicken is ~335 kcal, more than 200 * 1.1
        assert recommended_amount(chicken, MacroKey.PROTEIN, 63, max_calories=200) == 121

    def test_within_tolerance_is_not_capped(self, chicken) -> None:
        # 335 kcal <= 310 * 1.1
        assert recommended_amount(chicken, MacroKey.PROTEIN, 63, max_calories=310) == 203

    def test_no_value_returns_zero(self, make_food) -> None:
        oil = make_food("Aceite", protein_100g=0, carbs_100g=0, fat_100g=100, kcal_100g=884)
        assert recommended_amount(oil, MacroKey.PROTEIN, 50) == 0

    def test_missing_kcal_skips_cap(self, make_food) -> None:
        food = make_food("Pollo", protein_100g=31)
        assert recommended_amount(food, MacroKey.PROTEIN, 63, max_calories=100) == 203


class TestAmountText:
    """Test portion wording."""

    @pytest.mark.parametrize(
        "grams,expected",
        [
            (100, "2 huevos"),
            (75, "1.5 huevos"),
            (50, "1 huevos"),
            (12, "1/4 huevos"),
            (25, "1/2 huevos"),
            (40, "3/4 huevos"),
        ],
    )
    def test_units(self, grams: int, expected: str) -> None:
        assert amount_text(grams, "huevos", 50) == expected

    def test_grams_without_unit(self) -> None:
        assert amount_text(120, None, None) == "120g"

    def test_label_without_grams_per_unit_uses_grams(self) -> None:
        assert amount_text(120, "porción", None) == "120g"


class TestDaysAgoText:
    @pytest.mark.parametrize(
        "days,expected", [(0, "hoy"), (1, "ayer"), (2, "hace 2 días"), (12, "hace 12 días")]
    )
    def test_text(self, days: int, expected: str) -> None:
        assert days_ago_text(days) == expected
