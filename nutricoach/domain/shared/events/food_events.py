"""Food tracking events consumed by gamification.

Emitted by the food logging flow outside this package; the gamification
event handlers subscribe to them.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import uuid4

from nutricoach.domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class FoodLogged(DomainEvent):
    """A food log entry was saved for a user.

    Attributes:
        user_id: User who logged the food.
        log_date: Calendar day the entry belongs to (user's local day).
        food_name: Name of the logged food.
    """

    user_id: str
    log_date: date
    food_name: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.user_id:
            raise ValueError("user_id cannot be empty")

    @classmethod
    def create(cls, user_id: str, log_date: date, food_name: str) -> "FoodLogged":
        """Factory with auto-generated event_id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            log_date=log_date,
            food_name=food_name,
        )


@dataclass(frozen=True)
class FoodContributed(DomainEvent):
    """A user added a new food to the community catalog."""

    user_id: str
    food_name: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.user_id:
            raise ValueError("user_id cannot be empty")

    @classmethod
    def create(cls, user_id: str, food_name: str) -> "FoodContributed":
        """Factory with auto-generated event_id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            food_name=food_name,
        )
