"""
Recommendation engine.

Decides what the user should do next: eat a food that closes a macro or
calorie gap, move to burn a surplus, or start the day with a first meal.
Decision steps run in a fixed order and the first that applies wins.
"""

from __future__ import annotations

import random
from datetime import date, datetime
from typing import Optional

import structlog

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.ports.catalogs import (
    IActivityReader,
    IExerciseCatalogReader,
    IFoodCatalogReader,
)
from nutricoach.domain.coach.core.ports.tracer import ICoachTracer, NullCoachTracer
from nutricoach.domain.coach.core.recommendations import (
    CalorieRecommendation,
    CoachOutcome,
    ExerciseRecommendation,
    FirstMealRecommendation,
    MacroGap,
    MacroGaps,
    MacroRecommendation,
    RecommendedFood,
)
from nutricoach.domain.coach.core.value_objects.coach_profile import CoachProfile
from nutricoach.domain.coach.core.value_objects.enums import (
    DayPeriod,
    DietaryPreference,
    FoodSource,
    MacroKey,
    MealSlot,
)
from nutricoach.domain.coach.core.value_objects.nutrition import NutritionProgress
from nutricoach.domain.coach.services import messages
from nutricoach.domain.coach.services.dietary_filter import is_compatible
from nutricoach.domain.coach.services.exercise_planner import ExercisePlanner
from nutricoach.domain.coach.services.food_matcher import FoodGaps, FoodMatcher
from nutricoach.domain.coach.services.portion_calculator import (
    amount_text,
    days_ago_text,
    recommended_amount,
)
from nutricoach.domain.shared.errors import CatalogUnavailableError
from nutricoach.domain.shared.rounding import round_half_up

logger = structlog.get_logger(__name__)

NO_GAP_THRESHOLD = 10
MACRO_GAP_THRESHOLD = 5
MACRO_GAP_COVERAGE = 0.7
CALORIE_GAP_COVERAGE = 0.8

FIRST_MEAL_MIN_KCAL = 200
FIRST_MEAL_MAX_KCAL = 600
FIRST_MEAL_MIN_GRAMS = 50
FIRST_MEAL_MAX_GRAMS = 500


class RecommendationEngine:
    """
    Smart Coach decision engine.

    The engine is stateless between evaluations; re-entrancy and
    memoization are handled by RecommendationSession.

    Example:
        >>> engine = RecommendationEngine(food_catalog, exercise_catalog, activity_reader)
        >>> outcome = await engine.evaluate(profile, progress, now=datetime.now())
        >>> if outcome.recommendation is not None:
        ...     print(outcome.recommendation.message)
    """

    def __init__(
        self,
        food_catalog: IFoodCatalogReader,
        exercise_catalog: IExerciseCatalogReader,
        activity_reader: IActivityReader,
        tracer: Optional[ICoachTracer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._food_catalog = food_catalog
        self._exercise_catalog = exercise_catalog
        self._activity_reader = activity_reader
        self._tracer = tracer or NullCoachTracer()
        self._matcher = FoodMatcher(food_catalog)
        self._planner = ExercisePlanner(rng)

    async def evaluate(
        self,
        profile: CoachProfile,
        progress: NutritionProgress,
        now: datetime,
    ) -> CoachOutcome:
        """
        Run one evaluation.

        Args:
            profile: Validated user configuration
            progress: Consumption so far today
            now: User's local time (hour drives wording and exercise policy)

        Returns:
            CoachOutcome; CATALOG_UNAVAILABLE when a required catalog
            could not be read, never raises for catalog failures.
        """
        try:
            return await self._decide(profile, progress, now)
        except CatalogUnavailableError as e:
            self._tracer.decision("catalog_unavailable", error=str(e))
            logger.warning("Catalog unavailable", error=str(e))
            return CoachOutcome.catalog_unavailable(str(e))

    async def _decide(
        self,
        profile: CoachProfile,
        progress: NutritionProgress,
        now: datetime,
    ) -> CoachOutcome:
        target = profile.target

        if progress.is_empty():
            self._tracer.decision("empty_user", calories=progress.calories)
            return await self._first_meal(profile, now)

        excess = max(0.0, progress.calories - target.calories)
        if excess > 0:
            self._tracer.decision("surplus", excess=excess)
            return await self._exercise(profile, excess, now)

        calorie_gap = max(0.0, target.calories - progress.calories)
        if calorie_gap <= NO_GAP_THRESHOLD:
            self._tracer.decision("no_gap", calorie_gap=calorie_gap)
            return CoachOutcome.no_action()

        protein_gap = max(0.0, target.protein_g - progress.protein_g)
        carbs_gap = max(0.0, target.carbs_g - progress.carbs_g)
        fat_gap = max(0.0, target.fat_g - progress.fat_g)

        gaps = MacroGaps(
            protein=MacroGap(gap=protein_gap, consumed=progress.protein_g, target=target.protein_g),
            carbs=MacroGap(gap=carbs_gap, consumed=progress.carbs_g, target=target.carbs_g),
            fat=MacroGap(gap=fat_gap, consumed=progress.fat_g, target=target.fat_g),
            calories=MacroGap(gap=calorie_gap, consumed=progress.calories, target=target.calories),
        )

        if max(protein_gap, carbs_gap, fat_gap) > MACRO_GAP_THRESHOLD:
            return await self._macro(profile, gaps, now.date())

        return await self._calorie(profile, calorie_gap, now.date())

    # ============================================================
    # First meal
    # ============================================================

    async def _first_meal(self, profile: CoachProfile, now: datetime) -> CoachOutcome:
        try:
            catalog = await self._food_catalog.get_all_generic()
        except Exception as e:
            raise CatalogUnavailableError(f"Error al obtener alimentos: {e}") from e

        if not catalog:
            raise CatalogUnavailableError("No hay alimentos disponibles en el catálogo")

        best = select_first_meal_food(catalog, profile.dietary_preference)
        if best is None:
            self._tracer.decision("first_meal_no_candidate", catalog_size=len(catalog))
            return CoachOutcome.no_action()

        kcal = best.kcal_100g or 0
        portion_kcal = max(FIRST_MEAL_MIN_KCAL, min(FIRST_MEAL_MAX_KCAL, profile.target.calories / 4))
        grams = round_half_up((portion_kcal * 100) / kcal)
        grams = max(FIRST_MEAL_MIN_GRAMS, min(FIRST_MEAL_MAX_GRAMS, grams))

        slot = MealSlot.from_hour(now.hour)
        self._tracer.decision("first_meal", food=best.name, grams=grams, slot=slot.value)

        return CoachOutcome.recommended(
            FirstMealRecommendation(
                message=messages.first_meal_message(slot),
                recommended_food=RecommendedFood.from_candidate(best, grams),
                calorie_gap=round_half_up(profile.target.calories),
            )
        )

    # ============================================================
    # Surplus
    # ============================================================

    async def _exercise(self, profile: CoachProfile, excess: float, now: datetime) -> CoachOutcome:
        activity_burned = 0.0
        if profile.is_premium:
            activity_burned = await self._read_activity(now.date())

        remaining = max(0.0, excess - activity_burned)
        if remaining == 0 and activity_burned > 0:
            self._tracer.decision("compensated", activity_burned=activity_burned)
            return CoachOutcome.compensated(round_half_up(activity_burned))

        try:
            exercises = await self._exercise_catalog.list_all()
        except Exception as e:
            raise CatalogUnavailableError(f"Error al obtener ejercicios: {e}") from e

        if not exercises:
            raise CatalogUnavailableError("No hay ejercicios disponibles")

        suggestions = self._planner.plan(exercises, remaining, profile.weight_kg, now.hour)
        headline = suggestions[0]
        self._tracer.decision(
            "exercise",
            exercise=headline.name,
            minutes=headline.minutes_needed,
            remaining=remaining,
        )

        message = messages.exercise_message(
            DayPeriod.from_hour(now.hour),
            excess=round_half_up(excess),
            exercise_name=headline.name,
            minutes=round_half_up(headline.minutes_needed),
            activity_burned=round_half_up(activity_burned) if activity_burned > 0 else 0,
        )

        return CoachOutcome.recommended(
            ExerciseRecommendation(
                message=message,
                exercises=suggestions,
                excess_calories=round_half_up(excess),
                activity_calories_burned=(
                    round_half_up(activity_burned) if activity_burned > 0 else None
                ),
                remaining_excess=round_half_up(remaining) if remaining > 0 else None,
            )
        )

    async def _read_activity(self, day: date) -> float:
        """Burned calories for day; a failed read counts as no activity."""
        try:
            burned = await self._activity_reader.get_today_burned_calories(day)
        except Exception as e:
            logger.warning("Activity read failed, assuming no activity", error=str(e))
            return 0.0
        return burned if burned and burned > 0 else 0.0

    # ============================================================
    # Gaps
    # ============================================================

    async def _macro(self, profile: CoachProfile, gaps: MacroGaps, today: date) -> CoachOutcome:
        priority = priority_macro(gaps)
        priority_gap = getattr(gaps, priority.value).gap
        calorie_gap = gaps.calories.gap

        food = await self._matcher.find_best_match(
            FoodGaps(
                protein=gaps.protein.gap,
                carbs=gaps.carbs.gap,
                fat=gaps.fat.gap,
                calories=calorie_gap,
            ),
            priority,
            profile.dietary_preference,
        )
        if food is None:
            self._tracer.decision("macro_no_food", priority=priority.value)
            return CoachOutcome.no_action()

        amount = recommended_amount(food, priority, priority_gap * MACRO_GAP_COVERAGE, calorie_gap)
        if amount <= 0:
            return CoachOutcome.no_action()

        text = amount_text(amount, food.unit_label, food.grams_per_unit)
        message = messages.macro_message(
            food.source,
            food.name,
            text,
            priority.label_es,
            days_text=_days_text(food, today),
        )
        self._tracer.decision(
            "macro", priority=priority.value, food=food.name, source=food.source.value, grams=amount
        )

        return CoachOutcome.recommended(
            MacroRecommendation(
                priority_macro=priority,
                message=message,
                recommended_food=RecommendedFood.from_candidate(food, amount),
                macro_gaps=gaps,
            )
        )

    async def _calorie(self, profile: CoachProfile, calorie_gap: float, today: date) -> CoachOutcome:
        food = await self._matcher.find_best_match(
            FoodGaps(calories=calorie_gap),
            MacroKey.CALORIES,
            profile.dietary_preference,
        )
        if food is None:
            self._tracer.decision("calorie_no_food", calorie_gap=calorie_gap)
            return CoachOutcome.no_action()

        amount = recommended_amount(food, MacroKey.CALORIES, calorie_gap * CALORIE_GAP_COVERAGE)
        if amount <= 0:
            return CoachOutcome.no_action()

        rounded_gap = round_half_up(calorie_gap)
        message = messages.calorie_message(
            rounded_gap,
            food.name,
            amount_text(amount, food.unit_label, food.grams_per_unit),
            food.source,
            days_text=_days_text(food, today),
        )
        self._tracer.decision("calorie", food=food.name, source=food.source.value, grams=amount)

        return CoachOutcome.recommended(
            CalorieRecommendation(
                message=message,
                recommended_food=RecommendedFood.from_candidate(food, amount),
                calorie_gap=rounded_gap,
            )
        )


def priority_macro(gaps: MacroGaps) -> MacroKey:
    """Macro with the largest percentage gap; ties keep protein, then carbs.

    Example:
        >>> priority_macro(gaps)  # protein 60 %, carbs 60 %, fat 10 %
        <MacroKey.PROTEIN: 'protein'>
    """
    priority = MacroKey.PROTEIN
    best = _percent(gaps.protein)
    for key, gap in ((MacroKey.CARBS, gaps.carbs), (MacroKey.FAT, gaps.fat)):
        percent = _percent(gap)
        if percent > best:
            priority = key
            best = percent
    return priority


def select_first_meal_food(
    catalog: list[FoodCandidate], preference: Optional[DietaryPreference]
) -> Optional[FoodCandidate]:
    """Best generic food to start the day, by protein and energy score."""
    eligible = [
        food
        for food in catalog
        if food.kcal_100g
        and food.kcal_100g >= 40
        and food.has_complete_macros()
        and is_compatible(food.name, preference, food.tags)
        and not ((food.protein_100g or 0) < 1 and food.kcal_100g < 80)
    ]
    if not eligible:
        return None
    eligible.sort(key=lambda f: (f.protein_100g or 0) * 2 + (f.kcal_100g or 0) / 50, reverse=True)
    return eligible[0]


def _percent(gap: MacroGap) -> float:
    return gap.gap / gap.target * 100 if gap.target > 0 else 0.0


def _days_text(food: FoodCandidate, today: date) -> Optional[str]:
    if food.source is not FoodSource.HISTORY or food.last_eaten is None:
        return None
    return days_ago_text((today - food.last_eaten).days)
