"""In-memory tracked activity (calories burned per user and day)."""

from collections import defaultdict
from datetime import date


class InMemoryActivityLogRepository:
    """Burned calories keyed by (user_id, day)."""

    def __init__(self) -> None:
        self._burned: dict[tuple[str, date], float] = defaultdict(float)

    async def log(self, user_id: str, day: date, calories: float) -> None:
        """Add calories burned by an activity on day."""
        if calories < 0:
            raise ValueError(f"calories must be non-negative, got {calories}")
        self._burned[(user_id, day)] += calories

    async def burned_on(self, user_id: str, day: date) -> float:
        """Total burned on day, 0 when nothing was logged."""
        return self._burned.get((user_id, day), 0.0)

    def reader_for(self, user_id: str) -> "UserActivityReader":
        return UserActivityReader(self, user_id)

    def clear(self) -> None:
        self._burned.clear()


class UserActivityReader:
    """IActivityReader bound to one user."""

    def __init__(self, repository: InMemoryActivityLogRepository, user_id: str) -> None:
        self._repository = repository
        self._user_id = user_id

    async def get_today_burned_calories(self, day: date) -> float:
        return await self._repository.burned_on(self._user_id, day)
