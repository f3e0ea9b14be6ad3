"""Gamification domain services."""

from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine

__all__ = ["GamificationEngine"]
