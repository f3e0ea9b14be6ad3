"""Gamification entities."""

from nutricoach.domain.gamification.core.entities.user_stats import (
    Achievement,
    StatsUpdate,
    UserStats,
)

__all__ = ["Achievement", "StatsUpdate", "UserStats"]
