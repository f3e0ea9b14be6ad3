"""UserStats and Achievement entities."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Any, Optional

from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.core.value_objects.level import calculate_level
from nutricoach.domain.gamification.core.value_objects.rank import Rank, rank_for_xp


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserStats:
    """Persisted gamification state for one user.

    Level and rank are derived from XP and never stored.

    Attributes:
        user_id: Owner of the stats
        xp_points: Total experience points (>= 0)
        daily_streak: Consecutive days with at least one food log
        last_activity_date: Last day counted for the streak
        total_foods_contributed: Foods added to the community catalog
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    user_id: str
    xp_points: int = 0
    daily_streak: int = 0
    last_activity_date: Optional[date] = None
    total_foods_contributed: int = 0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id cannot be empty")
        if self.xp_points < 0:
            raise ValueError(f"xp_points must be non-negative, got {self.xp_points}")
        if self.daily_streak < 0:
            raise ValueError(f"daily_streak must be non-negative, got {self.daily_streak}")
        if self.total_foods_contributed < 0:
            raise ValueError(
                f"total_foods_contributed must be non-negative, got {self.total_foods_contributed}"
            )

    @property
    def level(self) -> int:
        return calculate_level(self.xp_points)

    @property
    def rank(self) -> Rank:
        return rank_for_xp(self.xp_points)

    @classmethod
    def new(cls, user_id: str) -> "UserStats":
        """Zeroed stats, created lazily on first access."""
        return cls(user_id=user_id)

    def apply(self, update: "StatsUpdate") -> "UserStats":
        """Return a copy with the non-None fields of update applied."""
        changes: dict[str, Any] = {
            name: value
            for name, value in (
                ("xp_points", update.xp_points),
                ("daily_streak", update.daily_streak),
                ("last_activity_date", update.last_activity_date),
                ("total_foods_contributed", update.total_foods_contributed),
            )
            if value is not None
        }
        return replace(self, updated_at=_utcnow(), **changes)


@dataclass(frozen=True)
class StatsUpdate:
    """Partial update for UserStats; None means unchanged."""

    xp_points: Optional[int] = None
    daily_streak: Optional[int] = None
    last_activity_date: Optional[date] = None
    total_foods_contributed: Optional[int] = None


@dataclass(frozen=True)
class Achievement:
    """An achievement unlocked by a user. Immutable once created."""

    user_id: str
    achievement_type: AchievementType
    unlocked_at: datetime = field(default_factory=_utcnow)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.achievement_type.title

    @property
    def description(self) -> str:
        return self.achievement_type.description
