"""AddXPCommand - award experience points."""

from dataclasses import dataclass

from nutricoach.domain.gamification.core.result import GamificationResult, XPAward
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine


@dataclass(frozen=True)
class AddXPCommand:
    """Command to add XP to a user.

    Attributes:
        user_id: User receiving the XP
        amount: XP to add (> 0)
        reason: Why the XP was awarded (for logs)
    """

    user_id: str
    amount: int
    reason: str

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValueError(f"amount must be positive, got {self.amount}")


class AddXPHandler:
    """Handler for AddXPCommand."""

    def __init__(self, engine: GamificationEngine):
        self._engine = engine

    async def handle(self, command: AddXPCommand) -> GamificationResult[XPAward]:
        return await self._engine.add_xp(command.user_id, command.amount, command.reason)
