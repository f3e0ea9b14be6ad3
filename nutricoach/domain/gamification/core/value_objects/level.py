"""Level arithmetic.

Level L starts at L² * 100 XP: level 1 at 100 XP, level 2 at 400,
level 3 at 900.
"""

import math
from dataclasses import dataclass


def calculate_level(xp: int) -> int:
    """Level reached with xp points.

    Example:
        >>> calculate_level(0), calculate_level(399), calculate_level(400)
        (0, 1, 2)
    """
    if xp <= 0:
        return 0
    return math.isqrt(xp // 100)


@dataclass(frozen=True)
class LevelProgress:
    """Progress through the current level.

    Attributes:
        current_level: Level for the XP total
        current_level_xp: XP where the current level starts
        next_level_xp: XP where the next level starts
        progress: Percentage through the level (0-100)
        xp_remaining: XP still needed for the next level
    """

    current_level: int
    current_level_xp: int
    next_level_xp: int
    progress: float
    xp_remaining: int

    @classmethod
    def for_xp(cls, xp: int) -> "LevelProgress":
        """
        Example:
            >>> LevelProgress.for_xp(250)
            LevelProgress(current_level=1, current_level_xp=100, next_level_xp=400, progress=50.0, xp_remaining=150)
        """
        level = calculate_level(xp)
        current_level_xp = level * level * 100
        next_level_xp = (level + 1) * (level + 1) * 100
        span = next_level_xp - current_level_xp
        progress = (xp - current_level_xp) / span * 100
        return cls(
            current_level=level,
            current_level_xp=current_level_xp,
            next_level_xp=next_level_xp,
            progress=min(100.0, max(0.0, progress)),
            xp_remaining=max(0, next_level_xp - xp),
        )
