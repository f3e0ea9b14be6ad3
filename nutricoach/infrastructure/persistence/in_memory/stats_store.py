"""In-memory implementation of IStatsStore."""

from copy import deepcopy

from nutricoach.domain.gamification.core.entities.user_stats import StatsUpdate, UserStats
from nutricoach.domain.gamification.core.ports.stores import IStatsStore
from nutricoach.domain.shared.errors import StatsStoreError


class InMemoryStatsStore(IStatsStore):
    """
    In-memory user stats.

    Suitable for testing and development. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._stats: dict[str, UserStats] = {}

    async def get(self, user_id: str) -> UserStats:
        stats = self._stats.get(user_id)
        if stats is None:
            stats = UserStats.new(user_id)
            self._stats[user_id] = stats
        return deepcopy(stats)

    async def update(self, user_id: str, update: StatsUpdate) -> UserStats:
        stats = self._stats.get(user_id)
        if stats is None:
            raise StatsStoreError(f"No stats for user {user_id}")
        updated = stats.apply(update)
        self._stats[user_id] = updated
        return deepcopy(updated)

    async def top_by_contributions(self, limit: int) -> list[UserStats]:
        ordered = sorted(
            self._stats.values(), key=lambda s: s.total_foods_contributed, reverse=True
        )
        return [deepcopy(s) for s in ordered[:limit]]

    async def count_with_more_contributions(self, contributions: int) -> int:
        return sum(1 for s in self._stats.values() if s.total_foods_contributed > contributions)

    def clear(self) -> None:
        self._stats.clear()

    def count(self) -> int:
        return len(self._stats)
