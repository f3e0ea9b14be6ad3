"""GetAchievementsQuery - achievement catalog joined with the user's unlocks."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from nutricoach.domain.gamification.core.result import GamificationResult
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine


@dataclass(frozen=True)
class GetAchievementsQuery:
    user_id: str


@dataclass(frozen=True)
class AchievementView:
    """One catalog entry with its unlock state."""

    achievement_type: AchievementType
    title: str
    description: str
    unlocked: bool
    unlocked_at: Optional[datetime] = None


class GetAchievementsHandler:
    """Handler for GetAchievementsQuery.

    Returns every known achievement in catalog order, flagging the ones
    the user has unlocked.
    """

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, query: GetAchievementsQuery) -> GamificationResult[list[AchievementView]]:
        result = await self._engine.get_user_achievements(query.user_id)
        if not result.ok:
            return GamificationResult.failure(result.error or "Achievements unavailable")

        unlocked = {a.achievement_type: a.unlocked_at for a in result.data or []}
        return GamificationResult.success(
            [
                AchievementView(
                    achievement_type=achievement_type,
                    title=achievement_type.title,
                    description=achievement_type.description,
                    unlocked=achievement_type in unlocked,
                    unlocked_at=unlocked.get(achievement_type),
                )
                for achievement_type in AchievementType
            ]
        )
