"""RecordDailyLogCommand - count a day with food logs towards the streak."""

from dataclasses import dataclass
from datetime import date

from nutricoach.domain.gamification.core.result import GamificationResult, XPAward
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine


@dataclass(frozen=True)
class RecordDailyLogCommand:
    user_id: str
    day: date


class RecordDailyLogHandler:
    """Handler for RecordDailyLogCommand.

    Not idempotent; dispatch once per user and day.
    """

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, command: RecordDailyLogCommand) -> GamificationResult[XPAward]:
        return await self._engine.record_daily_log(command.user_id, command.day)
