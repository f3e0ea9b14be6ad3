"""Engine construction from configuration."""

import random
from typing import Optional

from nutricoach.domain.coach.core.ports.catalogs import (
    IActivityReader,
    IExerciseCatalogReader,
    IFoodCatalogReader,
)
from nutricoach.domain.coach.core.ports.tracer import ICoachTracer
from nutricoach.domain.coach.services.recommendation_engine import RecommendationEngine
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine
from nutricoach.domain.shared.ports.event_bus import IEventBus
from nutricoach.infrastructure.config import get_coach_random_seed
from nutricoach.infrastructure.persistence.factory import (
    get_achievement_store,
    get_stats_store,
)
from nutricoach.infrastructure.tracing.structlog_tracer import StructlogCoachTracer


def create_recommendation_engine(
    food_catalog: IFoodCatalogReader,
    exercise_catalog: IExerciseCatalogReader,
    activity_reader: IActivityReader,
    tracer: Optional[ICoachTracer] = None,
) -> RecommendationEngine:
    """RecommendationEngine with a structlog tracer and COACH_RANDOM_SEED applied."""
    seed = get_coach_random_seed()
    return RecommendationEngine(
        food_catalog,
        exercise_catalog,
        activity_reader,
        tracer=tracer or StructlogCoachTracer(),
        rng=random.Random(seed) if seed is not None else None,
    )


def create_gamification_engine(event_bus: Optional[IEventBus] = None) -> GamificationEngine:
    """GamificationEngine over the configured stores."""
    return GamificationEngine(get_stats_store(), get_achievement_store(), event_bus=event_bus)
