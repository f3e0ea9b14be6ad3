"""Gamification ports."""

from nutricoach.domain.gamification.core.ports.food_log import IFoodLogReader
from nutricoach.domain.gamification.core.ports.stores import IAchievementStore, IStatsStore

__all__ = ["IAchievementStore", "IFoodLogReader", "IStatsStore"]
