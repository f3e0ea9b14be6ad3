"""Coach domain services."""

from nutricoach.domain.coach.services.recommendation_engine import RecommendationEngine

__all__ = ["RecommendationEngine"]
