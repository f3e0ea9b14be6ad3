"""
Recommendation models.

A recommendation is one of four concrete classes; consumers dispatch on
the class (or on `kind`), never on free-form strings. CoachOutcome wraps
the result of a single evaluation together with the reason when no
recommendation is produced.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from nutricoach.domain.coach.core.entities.candidates import FoodCandidate
from nutricoach.domain.coach.core.value_objects.enums import MacroKey


class RecommendationKind(str, Enum):
    """Discriminator for the recommendation variants."""

    MACRO = "macro"
    CALORIE = "calorie"
    EXERCISE = "exercise"
    FIRST_MEAL = "first_meal"


class RecommendedFood(FoodCandidate):
    """A food candidate with the portion the coach suggests."""

    recommended_amount: int = Field(..., gt=0, description="Suggested portion in grams")

    @classmethod
    def from_candidate(cls, candidate: FoodCandidate, amount: int) -> "RecommendedFood":
        return cls(**candidate.model_dump(), recommended_amount=amount)


class MacroGap(BaseModel):
    """Gap snapshot for one nutrient."""

    model_config = ConfigDict(frozen=True)

    gap: float = Field(..., ge=0)
    consumed: float
    target: float


class MacroGaps(BaseModel):
    """Gap snapshot for all four nutrients at evaluation time."""

    model_config = ConfigDict(frozen=True)

    protein: MacroGap
    carbs: MacroGap
    fat: MacroGap
    calories: MacroGap


class ExerciseSuggestion(BaseModel):
    """One exercise with the minutes needed to burn the surplus."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    met: float
    icon: Optional[str] = None
    minutes_needed: float = Field(..., ge=1)


class MacroRecommendation(BaseModel):
    """Eat a food to close the largest macro gap."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RecommendationKind.MACRO] = RecommendationKind.MACRO
    priority_macro: MacroKey
    message: str
    recommended_food: RecommendedFood
    macro_gaps: MacroGaps


class CalorieRecommendation(BaseModel):
    """Eat a food to close the calorie gap."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RecommendationKind.CALORIE] = RecommendationKind.CALORIE
    message: str
    recommended_food: RecommendedFood
    calorie_gap: int


class ExerciseRecommendation(BaseModel):
    """Move to burn today's calorie surplus."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RecommendationKind.EXERCISE] = RecommendationKind.EXERCISE
    message: str
    exercises: list[ExerciseSuggestion] = Field(..., min_length=1, max_length=2)
    excess_calories: int
    activity_calories_burned: Optional[int] = None
    remaining_excess: Optional[int] = None


class FirstMealRecommendation(BaseModel):
    """Nothing logged today yet: suggest a first meal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RecommendationKind.FIRST_MEAL] = RecommendationKind.FIRST_MEAL
    message: str
    recommended_food: RecommendedFood
    calorie_gap: int


Recommendation = Union[
    MacroRecommendation,
    CalorieRecommendation,
    ExerciseRecommendation,
    FirstMealRecommendation,
]


class OutcomeStatus(str, Enum):
    """Why an evaluation ended the way it did."""

    RECOMMENDED = "RECOMMENDED"
    NO_ACTION = "NO_ACTION"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    COMPENSATED = "COMPENSATED"
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"


class CoachOutcome(BaseModel):
    """
    Result of one engine evaluation.

    Only RECOMMENDED carries a recommendation. COMPENSATED means the day
    had a surplus already burned through activity, and carries the
    burned calories so the caller can congratulate the user.

    Example:
        >>> outcome = CoachOutcome.no_action()
        >>> outcome.recommendation is None
        True
    """

    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    recommendation: Optional[Recommendation] = None
    error: Optional[str] = None
    activity_calories_burned: Optional[int] = None

    @classmethod
    def recommended(cls, recommendation: Recommendation) -> "CoachOutcome":
        return cls(status=OutcomeStatus.RECOMMENDED, recommendation=recommendation)

    @classmethod
    def no_action(cls) -> "CoachOutcome":
        return cls(status=OutcomeStatus.NO_ACTION)

    @classmethod
    def not_configured(cls, error: str) -> "CoachOutcome":
        return cls(status=OutcomeStatus.NOT_CONFIGURED, error=error)

    @classmethod
    def compensated(cls, activity_calories_burned: int) -> "CoachOutcome":
        return cls(
            status=OutcomeStatus.COMPENSATED,
            activity_calories_burned=activity_calories_burned,
        )

    @classmethod
    def catalog_unavailable(cls, error: str) -> "CoachOutcome":
        return cls(status=OutcomeStatus.CATALOG_UNAVAILABLE, error=error)
