"""Gamification domain events."""

from nutricoach.domain.gamification.core.events.gamification_events import (
    AchievementUnlocked,
    RankChanged,
)

__all__ = ["AchievementUnlocked", "RankChanged"]
