"""Handler for FoodLogged events: daily streak and XP."""

import structlog

from nutricoach.domain.gamification.core.ports.food_log import IFoodLogReader
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine
from nutricoach.domain.shared.events.food_events import FoodLogged

logger = structlog.get_logger(__name__)


class FoodLoggedHandler:
    """Records the daily log on the first food log of each day.

    record_daily_log is not idempotent, so it only runs when the day's
    log count is exactly 1. Gamification failures are logged and never
    reach the food logging flow.
    """

    def __init__(self, engine: GamificationEngine, food_log_reader: IFoodLogReader):
        self._engine = engine
        self._food_logs = food_log_reader

    async def handle(self, event: FoodLogged) -> None:
        """Handle FoodLogged event.

        Args:
            event: FoodLogged domain event
        """
        try:
            count = await self._food_logs.count_for_day(event.user_id, event.log_date)
        except Exception as e:
            logger.warning(
                "Could not count food logs, skipping daily log",
                user_id=event.user_id,
                event_id=str(event.event_id),
                error=str(e),
            )
            return

        if count != 1:
            logger.debug(
                "Not the first log of the day", user_id=event.user_id, log_count=count
            )
            return

        result = await self._engine.record_daily_log(event.user_id, event.log_date)
        if not result.ok:
            logger.warning(
                "Daily log not recorded",
                user_id=event.user_id,
                event_id=str(event.event_id),
                error=result.error,
            )
