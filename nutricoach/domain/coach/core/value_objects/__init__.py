"""Coach value objects."""

from nutricoach.domain.coach.core.value_objects.coach_profile import CoachProfile
from nutricoach.domain.coach.core.value_objects.enums import (
    DayPeriod,
    DietaryPreference,
    FoodSource,
    MacroKey,
    MealSlot,
)
from nutricoach.domain.coach.core.value_objects.nutrition import (
    NutritionProgress,
    NutritionTarget,
)

__all__ = [
    "CoachProfile",
    "DayPeriod",
    "DietaryPreference",
    "FoodSource",
    "MacroKey",
    "MealSlot",
    "NutritionProgress",
    "NutritionTarget",
]
