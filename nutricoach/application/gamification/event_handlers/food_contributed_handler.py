"""Handler for FoodContributed events."""

import structlog

from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine
from nutricoach.domain.shared.events.food_events import FoodContributed

logger = structlog.get_logger(__name__)


class FoodContributedHandler:
    """Awards contribution XP. Failures are logged, never raised."""

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, event: FoodContributed) -> None:
        result = await self._engine.record_food_contribution(event.user_id)
        if not result.ok:
            logger.warning(
                "Food contribution not recorded",
                user_id=event.user_id,
                food_name=event.food_name,
                error=result.error,
            )
            return

        award = result.data
        if award is not None and award.rank_up and award.new_rank is not None:
            logger.info(
                "Contribution triggered rank up",
                user_id=event.user_id,
                new_rank=award.new_rank.name,
            )
