"""GetRecommendationQuery - evaluate the Smart Coach for a user."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from nutricoach.domain.coach.core.recommendations import CoachOutcome
from nutricoach.domain.coach.core.value_objects.coach_profile import CoachProfile
from nutricoach.domain.coach.core.value_objects.nutrition import NutritionProgress
from nutricoach.domain.coach.services.recommendation_engine import RecommendationEngine
from nutricoach.domain.shared.errors import CoachNotConfiguredError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetRecommendationQuery:
    """Query for the next coach recommendation.

    Profile values are optional as stored; the handler validates them
    into a CoachProfile before the engine runs.

    Attributes:
        now: User's local time
        weight_kg: Body weight
        calories_target: Daily kcal target
        protein_target: Daily protein target (g)
        carbs_target: Daily carbs target (g)
        fat_target: Daily fat target (g)
        consumed_calories: kcal consumed today
        consumed_protein: Protein consumed today (g)
        consumed_carbs: Carbs consumed today (g)
        consumed_fat: Fat consumed today (g)
        dietary_preference: Stored preference, None = omnivore
        is_premium: Premium subscription active
    """

    now: datetime
    weight_kg: Optional[float]
    calories_target: Optional[float]
    protein_target: Optional[float]
    carbs_target: Optional[float]
    fat_target: Optional[float]
    consumed_calories: float = 0.0
    consumed_protein: float = 0.0
    consumed_carbs: float = 0.0
    consumed_fat: float = 0.0
    dietary_preference: Optional[str] = None
    is_premium: bool = False


class GetRecommendationHandler:
    """Handler for GetRecommendationQuery.

    Builds the validated profile, then delegates to the engine. A profile
    that is not configured yields a NOT_CONFIGURED outcome, never an
    exception.
    """

    def __init__(self, engine: RecommendationEngine):
        self._engine = engine

    async def handle(self, query: GetRecommendationQuery) -> CoachOutcome:
        try:
            profile = CoachProfile.from_raw(
                weight_kg=query.weight_kg,
                calories_target=query.calories_target,
                protein_target=query.protein_target,
                carbs_target=query.carbs_target,
                fat_target=query.fat_target,
                dietary_preference=query.dietary_preference,
                is_premium=query.is_premium,
            )
        except CoachNotConfiguredError as e:
            logger.info("Coach not configured", reason=str(e))
            return CoachOutcome.not_configured(str(e))

        raw_preference = (query.dietary_preference or "").strip().lower()
        if raw_preference and raw_preference != profile.dietary_preference.value:
            logger.warning(
                "Unknown dietary preference, applying no restriction",
                dietary_preference=query.dietary_preference,
            )

        progress = NutritionProgress(
            calories=query.consumed_calories,
            protein_g=query.consumed_protein,
            carbs_g=query.consumed_carbs,
            fat_g=query.consumed_fat,
        )
        return await self._engine.evaluate(profile, progress, query.now)
