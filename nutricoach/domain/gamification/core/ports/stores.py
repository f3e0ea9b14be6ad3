"""Persistence ports for gamification state."""

from abc import ABC, abstractmethod

from nutricoach.domain.gamification.core.entities.user_stats import (
    Achievement,
    StatsUpdate,
    UserStats,
)
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType


class IStatsStore(ABC):
    """
    Port for user stats persistence.

    Implementations raise on storage failure; the engine converts
    failures into GamificationResult.failure.
    """

    @abstractmethod
    async def get(self, user_id: str) -> UserStats:
        """
        Stats for user_id, created with zero defaults when missing.

        Args:
            user_id: User identifier

        Returns:
            UserStats: Existing or newly created stats
        """
        pass

    @abstractmethod
    async def update(self, user_id: str, update: StatsUpdate) -> UserStats:
        """
        Apply a partial update.

        Args:
            user_id: User identifier
            update: Fields to change

        Returns:
            UserStats: Stats after the update

        Raises:
            StatsStoreError: If the user has no stats
        """
        pass

    @abstractmethod
    async def top_by_contributions(self, limit: int) -> list[UserStats]:
        """Users with the most contributed foods, highest first."""
        pass

    @abstractmethod
    async def count_with_more_contributions(self, contributions: int) -> int:
        """Number of users with strictly more contributed foods."""
        pass


class IAchievementStore(ABC):
    """Port for unlocked achievements."""

    @abstractmethod
    async def exists(self, user_id: str, achievement_type: AchievementType) -> bool:
        pass

    @abstractmethod
    async def insert(self, achievement: Achievement) -> None:
        """
        Persist a newly unlocked achievement.

        Raises:
            AchievementUnlockError: If the user already has this achievement
        """
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Achievement]:
        """Achievements of user_id, most recently unlocked first."""
        pass
