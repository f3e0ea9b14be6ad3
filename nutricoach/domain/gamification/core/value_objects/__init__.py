"""Gamification value objects."""

from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.core.value_objects.level import LevelProgress, calculate_level
from nutricoach.domain.gamification.core.value_objects.rank import RANKS, Rank, RankTier, rank_for_xp

__all__ = [
    "AchievementType",
    "LevelProgress",
    "RANKS",
    "Rank",
    "RankTier",
    "calculate_level",
    "rank_for_xp",
]
