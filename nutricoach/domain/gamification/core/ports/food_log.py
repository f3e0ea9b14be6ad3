"""Food log read port used to detect the first log of a day."""

from datetime import date
from typing import Protocol


class IFoodLogReader(Protocol):
    """Read access to a user's food log."""

    async def count_for_day(self, user_id: str, day: date) -> int:
        """Number of food log entries user_id has on day."""
        ...
