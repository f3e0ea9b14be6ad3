"""Gamification domain events."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from nutricoach.domain.gamification.core.value_objects.achievement_type import AchievementType
from nutricoach.domain.gamification.core.value_objects.rank import RankTier
from nutricoach.domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class RankChanged(DomainEvent):
    """User crossed a rank threshold.

    Attributes:
        user_id: User whose rank changed
        old_rank: Tier before the XP change
        new_rank: Tier after the XP change
        xp_points: XP total after the change
    """

    user_id: str
    old_rank: RankTier
    new_rank: RankTier
    xp_points: int

    @classmethod
    def create(
        cls, user_id: str, old_rank: RankTier, new_rank: RankTier, xp_points: int
    ) -> "RankChanged":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            old_rank=old_rank,
            new_rank=new_rank,
            xp_points=xp_points,
        )


@dataclass(frozen=True)
class AchievementUnlocked(DomainEvent):
    """User unlocked an achievement for the first time."""

    user_id: str
    achievement_type: AchievementType

    @classmethod
    def create(cls, user_id: str, achievement_type: AchievementType) -> "AchievementUnlocked":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            achievement_type=achievement_type,
        )
