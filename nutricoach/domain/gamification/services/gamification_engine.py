"""
Gamification engine.

XP, streaks, achievements and leaderboard queries. Every stats change
is a read-modify-write through IStatsStore. Public operations never
raise: store failures come back as GamificationResult.failure, and
achievement unlock failures are logged and swallowed.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Optional

import structlog

from nutricoach.domain.gamification.core.entities.user_stats import (
    Achievement,
    StatsUpdate,
    UserStats,
)
from nutricoach.domain.gamification.core.events.gamification_events import (
    AchievementUnlocked,
    RankChanged,
)
from nutricoach.domain.gamification.core.ports.stores import IAchievementStore, IStatsStore
from nutricoach.domain.gamification.core.result import (
    GamificationResult,
    LeaderboardEntry,
    XPAward,
)
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.core.value_objects.level import LevelProgress
from nutricoach.domain.shared.events.base import DomainEvent
from nutricoach.domain.shared.ports.event_bus import IEventBus

logger = structlog.get_logger(__name__)

CONTRIBUTION_XP = 50
DAILY_LOG_XP = 10
COMMUNITY_CHEF_CONTRIBUTIONS = 10
WEEK_STREAK_DAYS = 7
MONTH_STREAK_DAYS = 30
DEFAULT_LEADERBOARD_LIMIT = 10


def next_streak(current: int, last_activity: Optional[date], day: date) -> int:
    """Streak after logging on day.

    Example:
        >>> next_streak(3, date(2024, 1, 9), date(2024, 1, 10))
        4
        >>> next_streak(3, date(2024, 1, 7), date(2024, 1, 10))
        1
    """
    if last_activity is None:
        return 1
    if last_activity == day - timedelta(days=1):
        return current + 1
    if last_activity != day:
        return 1
    return current


class GamificationEngine:
    """
    Engagement scoring for a user base.

    Args:
        stats_store: User stats persistence
        achievement_store: Unlocked achievements persistence
        event_bus: Optional bus for RankChanged / AchievementUnlocked
        clock: Time source for unlock timestamps (UTC)

    Example:
        >>> engine = GamificationEngine(stats_store, achievement_store)
        >>> result = await engine.record_daily_log("user123", date.today())
        >>> result.data.stats.daily_streak
        1
    """

    def __init__(
        self,
        stats_store: IStatsStore,
        achievement_store: IAchievementStore,
        event_bus: Optional[IEventBus] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._stats = stats_store
        self._achievements = achievement_store
        self._event_bus = event_bus
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ============================================================
    # Stats
    # ============================================================

    async def get_user_stats(self, user_id: str) -> GamificationResult[UserStats]:
        """Stats for user_id, created with zero defaults on first access."""
        try:
            return GamificationResult.success(await self._stats.get(user_id))
        except Exception as e:
            logger.error("Failed to load user stats", user_id=user_id, error=str(e))
            return GamificationResult.failure(str(e))

    async def add_xp(self, user_id: str, amount: int, reason: str) -> GamificationResult[XPAward]:
        """
        Add XP and report rank changes.

        Args:
            user_id: User identifier
            amount: XP to add
            reason: Free-form reason, logged only

        Returns:
            GamificationResult with XPAward (new_rank only on rank-up)
        """
        try:
            stats = await self._stats.get(user_id)
            updated = await self._stats.update(
                user_id, StatsUpdate(xp_points=stats.xp_points + amount)
            )
        except Exception as e:
            logger.error("Failed to add XP", user_id=user_id, amount=amount, error=str(e))
            return GamificationResult.failure(str(e))

        logger.info(
            "XP added",
            user_id=user_id,
            amount=amount,
            reason=reason,
            xp_points=updated.xp_points,
            level=updated.level,
        )
        return GamificationResult.success(await self._award(stats, updated))

    async def record_food_contribution(self, user_id: str) -> GamificationResult[XPAward]:
        """+50 XP and one more contributed food; unlocks contribution achievements."""
        try:
            stats = await self._stats.get(user_id)
            previous_total = stats.total_foods_contributed
            updated = await self._stats.update(
                user_id,
                StatsUpdate(
                    xp_points=stats.xp_points + CONTRIBUTION_XP,
                    total_foods_contributed=previous_total + 1,
                ),
            )
        except Exception as e:
            logger.error("Failed to record food contribution", user_id=user_id, error=str(e))
            return GamificationResult.failure(str(e))

        if previous_total == 0:
            await self.unlock_achievement(user_id, AchievementType.FIRST_CONTRIBUTION)
        if updated.total_foods_contributed == COMMUNITY_CHEF_CONTRIBUTIONS:
            await self.unlock_achievement(user_id, AchievementType.COMMUNITY_CHEF)

        logger.info(
            "Food contribution recorded",
            user_id=user_id,
            total_foods_contributed=updated.total_foods_contributed,
        )
        return GamificationResult.success(await self._award(stats, updated))

    async def record_daily_log(self, user_id: str, day: date) -> GamificationResult[XPAward]:
        """
        +10 XP and streak update for a day with a food log.

        Not idempotent: callers must invoke it once per day (first log).
        """
        try:
            stats = await self._stats.get(user_id)
            streak = next_streak(stats.daily_streak, stats.last_activity_date, day)
            updated = await self._stats.update(
                user_id,
                StatsUpdate(
                    xp_points=stats.xp_points + DAILY_LOG_XP,
                    daily_streak=streak,
                    last_activity_date=day,
                ),
            )
        except Exception as e:
            logger.error("Failed to record daily log", user_id=user_id, day=str(day), error=str(e))
            return GamificationResult.failure(str(e))

        if updated.daily_streak == WEEK_STREAK_DAYS:
            await self.unlock_achievement(user_id, AchievementType.WEEK_STREAK)
        elif updated.daily_streak == MONTH_STREAK_DAYS:
            await self.unlock_achievement(user_id, AchievementType.MONTH_STREAK)

        logger.info("Daily log recorded", user_id=user_id, daily_streak=updated.daily_streak)
        return GamificationResult.success(await self._award(stats, updated))

    # ============================================================
    # Achievements
    # ============================================================

    async def unlock_achievement(
        self,
        user_id: str,
        achievement_type: AchievementType,
        metadata: Optional[dict[str, Any]] = None,
    ) -> bool:
        """
        Unlock an achievement once per user.

        Returns:
            True when newly unlocked, False when already unlocked or on error
        """
        try:
            if await self._achievements.exists(user_id, achievement_type):
                return False
            await self._achievements.insert(
                Achievement(
                    user_id=user_id,
                    achievement_type=achievement_type,
                    unlocked_at=self._clock(),
                    metadata=metadata or {},
                )
            )
        except Exception as e:
            logger.error(
                "Failed to unlock achievement",
                user_id=user_id,
                achievement_type=achievement_type.value,
                error=str(e),
            )
            return False

        logger.info("Achievement unlocked", user_id=user_id, achievement_type=achievement_type.value)
        await self._publish(AchievementUnlocked.create(user_id, achievement_type))
        return True

    async def get_user_achievements(self, user_id: str) -> GamificationResult[list[Achievement]]:
        """Unlocked achievements, newest first."""
        try:
            achievements = await self._achievements.list_for_user(user_id)
        except Exception as e:
            logger.error("Failed to load achievements", user_id=user_id, error=str(e))
            return GamificationResult.failure(str(e))
        return GamificationResult.success(
            sorted(achievements, key=lambda a: a.unlocked_at, reverse=True)
        )

    # ============================================================
    # Leaderboard
    # ============================================================

    async def get_leaderboard(
        self, limit: int = DEFAULT_LEADERBOARD_LIMIT
    ) -> GamificationResult[list[LeaderboardEntry]]:
        """Top users by contributed foods, positions starting at 1."""
        try:
            top = await self._stats.top_by_contributions(limit)
        except Exception as e:
            logger.error("Failed to load leaderboard", limit=limit, error=str(e))
            return GamificationResult.failure(str(e))

        return GamificationResult.success(
            [
                LeaderboardEntry(
                    user_id=stats.user_id,
                    xp_points=stats.xp_points,
                    level=stats.level,
                    contribution_count=stats.total_foods_contributed,
                    position=index + 1,
                )
                for index, stats in enumerate(top)
            ]
        )

    async def get_user_ranking_position(self, user_id: str) -> GamificationResult[int]:
        """1 + number of users with strictly more contributions."""
        try:
            stats = await self._stats.get(user_id)
            ahead = await self._stats.count_with_more_contributions(stats.total_foods_contributed)
        except Exception as e:
            logger.error("Failed to compute ranking position", user_id=user_id, error=str(e))
            return GamificationResult.failure(str(e))
        return GamificationResult.success(ahead + 1)

    @staticmethod
    def level_progress(xp: int) -> LevelProgress:
        return LevelProgress.for_xp(xp)

    # ============================================================
    # Internals
    # ============================================================

    async def _award(self, before: UserStats, after: UserStats) -> XPAward:
        old_rank = before.rank
        new_rank = after.rank
        if old_rank.tier is new_rank.tier:
            return XPAward(stats=after)

        logger.info(
            "Rank up",
            user_id=after.user_id,
            old_rank=old_rank.name,
            new_rank=new_rank.name,
            xp_points=after.xp_points,
        )
        await self._publish(
            RankChanged.create(after.user_id, old_rank.tier, new_rank.tier, after.xp_points)
        )
        return XPAward(stats=after, rank_up=True, new_rank=new_rank)

    async def _publish(self, event: DomainEvent) -> None:
        if self._event_bus is None:
            return
        try:
            await self._event_bus.publish(event)
        except Exception as e:
            logger.warning(
                "Event publish failed", event_type=type(event).__name__, error=str(e)
            )
