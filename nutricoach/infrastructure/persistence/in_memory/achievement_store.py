"""In-memory implementation of IAchievementStore."""

from copy import deepcopy

from nutricoach.domain.gamification.core.entities.user_stats import Achievement
from nutricoach.domain.gamification.core.ports.stores import IAchievementStore
from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.shared.errors import AchievementUnlockError


class InMemoryAchievementStore(IAchievementStore):
    """Achievements keyed by (user_id, type); one per pair."""

    def __init__(self) -> None:
        self._achievements: dict[tuple[str, AchievementType], Achievement] = {}

    async def exists(self, user_id: str, achievement_type: AchievementType) -> bool:
        return (user_id, achievement_type) in self._achievements

    async def insert(self, achievement: Achievement) -> None:
        key = (achievement.user_id, achievement.achievement_type)
        if key in self._achievements:
            raise AchievementUnlockError(
                f"Achievement {achievement.achievement_type.value} already unlocked "
                f"for {achievement.user_id}"
            )
        self._achievements[key] = deepcopy(achievement)

    async def list_for_user(self, user_id: str) -> list[Achievement]:
        owned = [a for (uid, _), a in self._achievements.items() if uid == user_id]
        owned.sort(key=lambda a: a.unlocked_at, reverse=True)
        return [deepcopy(a) for a in owned]

    def clear(self) -> None:
        self._achievements.clear()

    def count(self) -> int:
        return len(self._achievements)
