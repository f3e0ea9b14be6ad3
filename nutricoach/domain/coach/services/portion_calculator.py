"""Portion and exercise-duration arithmetic.

Pure functions shared by every branch of the recommendation engine.
"""

from typing import Optional

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.value_objects.enums import MacroKey
from nutricoach.domain.shared.rounding import format_number, round_half_up, round_one_decimal

# Allowed overshoot over the calorie gap before the portion is capped
CALORIE_CAP_TOLERANCE = 1.1

_QUARTER_FRACTIONS = {0.25: "1/4", 0.5: "1/2", 0.75: "3/4"}


def minutes_to_burn(excess_kcal: float, met_value: float, weight_kg: float) -> float:
    """Minutes of an activity needed to burn excess_kcal.

    Uses kcal/min = MET * 3.5 * weight / 200, rounded to one decimal and
    floored at one minute.

    Args:
        excess_kcal: Calories to burn
        met_value: Metabolic equivalent of the activity
        weight_kg: User body weight

    Returns:
        Minutes needed (>= 1). Returns 1 when MET or weight is not positive.

    Example:
        >>> minutes_to_burn(300, 3.5, 70)
        69.9
    """
    if weight_kg <= 0 or met_value <= 0:
        return 1.0
    minutes = (excess_kcal * 200) / (met_value * 3.5 * weight_kg)
    return max(1.0, round_one_decimal(minutes))


def recommended_amount(
    food: FoodCandidate,
    key: MacroKey,
    target_value: float,
    max_calories: Optional[float] = None,
) -> int:
    """Grams of food needed to supply target_value of the key nutrient.

    When max_calories is given and the portion would exceed it by more
    than 10 %, the portion is resized to exactly max_calories.

    Returns:
        Grams, 0 when the food has no positive value for key

    Example:
        >>> food = FoodCandidate(name="Pollo", source="generic", protein_100g=31, kcal_100g=165)
        >>> recommended_amount(food, MacroKey.PROTEIN, 31)
        100
    """
    macro_value = food.value_for(key) or 0
    if macro_value <= 0:
        return 0

    grams = (target_value * 100) / macro_value

    kcal = food.kcal_100g or 0
    if max_calories and max_calories > 0 and kcal > 0:
        calories_for_portion = (kcal * grams) / 100
        if calories_for_portion > max_calories * CALORIE_CAP_TOLERANCE:
            return round_half_up((max_calories * 100) / kcal)

    return round_half_up(grams)


def amount_text(amount_grams: int, unit_label: Optional[str], grams_per_unit: Optional[float]) -> str:
    """Human text for a portion.

    Household units are shown when the food has them: whole units with one
    decimal, fractions below one unit rounded to the nearest quarter.

    Example:
        >>> amount_text(100, "huevos", 50)
        '2 huevos'
        >>> amount_text(25, "huevos", 50)
        '1/2 huevos'
        >>> amount_text(120, None, None)
        '120g'
    """
    if grams_per_unit and unit_label:
        units = amount_grams / grams_per_unit
        if units >= 1:
            return f"{format_number(round_one_decimal(units))} {unit_label}"
        rounded = round_half_up(units * 4) / 4
        fraction = _QUARTER_FRACTIONS.get(rounded)
        if fraction is None:
            fraction = format_number(round_one_decimal(units))
        return f"{fraction} {unit_label}"
    return f"{amount_grams}g"


def days_ago_text(days: int) -> str:
    """Spanish relative-day text.

    Example:
        >>> days_ago_text(0), days_ago_text(1), days_ago_text(4)
        ('hoy', 'ayer', 'hace 4 días')
    """
    if days <= 0:
        return "hoy"
    if days == 1:
        return "ayer"
    return f"hace {days} días"
