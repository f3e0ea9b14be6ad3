"""GetUserStatsQuery - stats with derived level, rank and level progress."""

from dataclasses import dataclass

from nutricoach.domain.gamification.core.entities.user_stats import UserStats
from nutricoach.domain.gamification.core.result import GamificationResult
from nutricoach.domain.gamification.core.value_objects.level import LevelProgress
from nutricoach.domain.gamification.core.value_objects.rank import Rank
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine


@dataclass(frozen=True)
class GetUserStatsQuery:
    user_id: str


@dataclass(frozen=True)
class UserStatsView:
    """Stats as shown on the profile screen.

    Attributes:
        stats: Persisted stats
        rank: Current rank
        level_progress: Progress towards the next level
    """

    stats: UserStats
    rank: Rank
    level_progress: LevelProgress


class GetUserStatsHandler:
    """Handler for GetUserStatsQuery."""

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, query: GetUserStatsQuery) -> GamificationResult[UserStatsView]:
        result = await self._engine.get_user_stats(query.user_id)
        if not result.ok or result.data is None:
            return GamificationResult.failure(result.error or "Stats unavailable")

        stats = result.data
        return GamificationResult.success(
            UserStatsView(
                stats=stats,
                rank=stats.rank,
                level_progress=GamificationEngine.level_progress(stats.xp_points),
            )
        )
