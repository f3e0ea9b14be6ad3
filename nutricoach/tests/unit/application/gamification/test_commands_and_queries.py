"""Unit tests for gamification commands and queries.

Handlers run against a real engine backed by in-memory stores.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from nutricoach.application.gamification.commands.add_xp import AddXPCommand, AddXPHandler
from nutricoach.application.gamification.commands.record_daily_log import (
    RecordDailyLogCommand,
    RecordDailyLogHandler,
)
from nutricoach.application.gamification.commands.record_food_contribution import (
    RecordFoodContributionCommand,
    RecordFoodContributionHandler,
)
from nutricoach.application.gamification.queries.get_achievements import (
    GetAchievementsHandler,
    GetAchievementsQuery,
)
from nutricoach.application.gamification.queries.get_leaderboard import (
    GetLeaderboardHandler,
    GetLeaderboardQuery,
    GetRankingPositionHandler,
    GetRankingPositionQuery,
)
from nutricoach.application.gamification.queries.get_user_stats import (
    GetUserStatsHandler,
    GetUserStatsQuery,
)
from nutricoach.domain.gamification.core.result import GamificationResult
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.core.value_objects.rank import RankTier
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine
from nutricoach.infrastructure.persistence.in_memory.achievement_store import (
    InMemoryAchievementStore,
)
from nutricoach.infrastructure.persistence.in_memory.stats_store import InMemoryStatsStore

USER = "user123"


@pytest.fixture
def engine() -> GamificationEngine:
    return GamificationEngine(InMemoryStatsStore(), InMemoryAchievementStore())


# ============================================
# Commands
# ============================================


class TestAddXP:
    def test_amount_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="amount must be positive"):
            AddXPCommand(user_id=USER, amount=0, reason="bonus")

    @pytest.mark.asyncio
    async def test_handle(self, engine) -> None:
        result = await AddXPHandler(engine).handle(
            AddXPCommand(user_id=USER, amount=40, reason="challenge")
        )

        assert result.ok
        assert result.data.stats.xp_points == 40


class TestRecordDailyLog:
    @pytest.mark.asyncio
    async def test_handle(self, engine) -> None:
        result = await RecordDailyLogHandler(engine).handle(
            RecordDailyLogCommand(user_id=USER, day=date(2024, 3, 15))
        )

        assert result.data.stats.daily_streak == 1
        assert result.data.stats.xp_points == 10


class TestRecordFoodContribution:
    @pytest.mark.asyncio
    async def test_handle(self, engine) -> None:
        result = await RecordFoodContributionHandler(engine).handle(
            RecordFoodContributionCommand(user_id=USER)
        )

        assert result.data.stats.total_foods_contributed == 1
        assert result.data.stats.xp_points == 50


# ============================================
# Queries
# ============================================


class TestGetUserStats:
    """Test the profile view."""

    @pytest.mark.asyncio
    async def test_new_user_view(self, engine) -> None:
        result = await GetUserStatsHandler(engine).handle(GetUserStatsQuery(user_id=USER))

        view = result.data
        assert view.stats.xp_points == 0
        assert view.rank.tier is RankTier.NOVATO
        assert view.level_progress.current_level == 0
        assert view.level_progress.next_level_xp == 100

    @pytest.mark.asyncio
    async def test_view_after_xp(self, engine) -> None:
        await engine.add_xp(USER, 650, "bonus")

        view = (await GetUserStatsHandler(engine).handle(GetUserStatsQuery(user_id=USER))).data

        assert view.rank.tier is RankTier.ENTUSIASTA
        assert view.level_progress.current_level == 2
        assert view.level_progress.xp_remaining == 250

    @pytest.mark.asyncio
    async def test_failure_is_passed_through(self) -> None:
        mock_engine = AsyncMock(spec=GamificationEngine)
        mock_engine.get_user_stats.return_value = GamificationResult.failure("db down")

        result = await GetUserStatsHandler(mock_engine).handle(GetUserStatsQuery(user_id=USER))

        assert result.ok is False
        assert result.error == "db down"


class TestGetAchievements:
    """Test the achievement catalog view."""

    @pytest.mark.asyncio
    async def test_catalog_with_unlock_flags(self, engine) -> None:
        await engine.record_food_contribution(USER)

        result = await GetAchievementsHandler(engine).handle(GetAchievementsQuery(user_id=USER))

        views = {v.achievement_type: v for v in result.data}
        assert list(views) == list(AchievementType)
        assert views[AchievementType.FIRST_CONTRIBUTION].unlocked is True
        assert views[AchievementType.FIRST_CONTRIBUTION].unlocked_at is not None
        assert views[AchievementType.FIRST_CONTRIBUTION].title == "Primer Aporte"
        assert views[AchievementType.WEEK_STREAK].unlocked is False
        assert views[AchievementType.WEEK_STREAK].unlocked_at is None

    @pytest.mark.asyncio
    async def test_failure_is_passed_through(self) -> None:
        mock_engine = AsyncMock(spec=GamificationEngine)
        mock_engine.get_user_achievements.return_value = GamificationResult.failure("timeout")

        result = await GetAchievementsHandler(mock_engine).handle(
            GetAchievementsQuery(user_id=USER)
        )

        assert result.ok is False


class TestLeaderboardQueries:
    def test_limit_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            GetLeaderboardQuery(limit=0)

    def test_default_limit(self) -> None:
        assert GetLeaderboardQuery().limit == 10

    @pytest.mark.asyncio
    async def test_leaderboard_and_position(self, engine) -> None:
        for _ in range(3):
            await engine.record_food_contribution("ana")
        await engine.record_food_contribution(USER)

        board = await GetLeaderboardHandler(engine).handle(GetLeaderboardQuery(limit=5))
        position = await GetRankingPositionHandler(engine).handle(
            GetRankingPositionQuery(user_id=USER)
        )

        assert [e.user_id for e in board.data] == ["ana", USER]
        assert position.data == 2
