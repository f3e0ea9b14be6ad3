"""Rank value object - XP tier shown next to the user's avatar."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RankTier(str, Enum):
    """The four fixed tiers, lowest first."""

    NOVATO = "Novato"
    ENTUSIASTA = "Entusiasta"
    ATLETA = "Atleta"
    MASTER_PRO = "Master Pro"


@dataclass(frozen=True)
class Rank:
    """A tier with its XP bounds.

    Attributes:
        tier: Tier identity
        emoji: Badge shown in the UI
        min_xp: Lowest XP in the tier (inclusive)
        max_xp: Highest XP in the tier (inclusive), None for the top tier
    """

    tier: RankTier
    emoji: str
    min_xp: int
    max_xp: Optional[int]

    @property
    def name(self) -> str:
        return self.tier.value

    def contains(self, xp: int) -> bool:
        return xp >= self.min_xp and (self.max_xp is None or xp <= self.max_xp)


RANKS: tuple[Rank, ...] = (
    Rank(RankTier.NOVATO, "🥚", 0, 500),
    Rank(RankTier.ENTUSIASTA, "🥗", 501, 2000),
    Rank(RankTier.ATLETA, "💪", 2001, 4999),
    Rank(RankTier.MASTER_PRO, "👑", 5000, None),
)


def rank_for_xp(xp: int) -> Rank:
    """Rank for an XP total.

    Example:
        >>> rank_for_xp(500).name, rank_for_xp(501).name
        ('Novato', 'Entusiasta')
    """
    if xp >= 5000:
        return RANKS[3]
    if xp >= 2001:
        return RANKS[2]
    if xp >= 501:
        return RANKS[1]
    return RANKS[0]
