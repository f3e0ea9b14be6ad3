"""Result type returned by gamification operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from nutricoach.domain.gamification.core.entities.user_stats import UserStats
from nutricoach.domain.gamification.core.value_objects.rank import Rank

T = TypeVar("T")


@dataclass(frozen=True)
class GamificationResult(Generic[T]):
    """Explicit success/failure wrapper.

    Gamification is a side effect of other user actions, so its failures
    are reported as values the caller can log and ignore.

    Example:
        >>> result = await engine.add_xp("user123", 10, "daily_log")
        >>> if not result.ok:
        ...     logger.warning("XP not awarded", error=result.error)
    """

    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: T) -> "GamificationResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "GamificationResult[T]":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class XPAward:
    """Stats after an XP change and whether the rank changed.

    Attributes:
        stats: Stats after the write
        rank_up: True when the rank differs from the one before
        new_rank: The new rank, only set when rank_up is True
    """

    stats: UserStats
    rank_up: bool = False
    new_rank: Optional[Rank] = None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One row of the contributions leaderboard."""

    user_id: str
    xp_points: int
    level: int
    contribution_count: int
    position: int
