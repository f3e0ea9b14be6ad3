"""RecordFoodContributionCommand - reward adding a food to the community catalog."""

from dataclasses import dataclass

from nutricoach.domain.gamification.core.result import GamificationResult, XPAward
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine


@dataclass(frozen=True)
class RecordFoodContributionCommand:
    user_id: str


class RecordFoodContributionHandler:
    """Handler for RecordFoodContributionCommand."""

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(
        self, command: RecordFoodContributionCommand
    ) -> GamificationResult[XPAward]:
        return await self._engine.record_food_contribution(command.user_id)
