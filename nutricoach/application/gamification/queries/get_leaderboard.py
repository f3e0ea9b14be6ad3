"""Leaderboard queries."""

from dataclasses import dataclass

from nutricoach.domain.gamification.core.result import GamificationResult, LeaderboardEntry
from nutricoach.domain.gamification.services.gamification_engine import (
    DEFAULT_LEADERBOARD_LIMIT,
    GamificationEngine,
)


@dataclass(frozen=True)
class GetLeaderboardQuery:
    limit: int = DEFAULT_LEADERBOARD_LIMIT

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")


class GetLeaderboardHandler:
    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, query: GetLeaderboardQuery) -> GamificationResult[list[LeaderboardEntry]]:
        return await self._engine.get_leaderboard(query.limit)


@dataclass(frozen=True)
class GetRankingPositionQuery:
    user_id: str


class GetRankingPositionHandler:
    """Position of a user in the contributions ranking (1-based)."""

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, query: GetRankingPositionQuery) -> GamificationResult[int]:
        return await self._engine.get_user_ranking_position(query.user_id)
