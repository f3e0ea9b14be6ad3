"""Gamification event handlers and their bus registration."""

from nutricoach.application.gamification.event_handlers.food_contributed_handler import (
    FoodContributedHandler,
)
from nutricoach.application.gamification.event_handlers.food_logged_handler import (
    FoodLoggedHandler,
)
from nutricoach.domain.gamification.core.ports.food_log import IFoodLogReader
from nutricoach.domain.gamification.services.gamification_engine import GamificationEngine
from nutricoach.domain.shared.events.food_events import FoodContributed, FoodLogged
from nutricoach.domain.shared.ports.event_bus import IEventBus


def register_gamification_handlers(
    event_bus: IEventBus,
    engine: GamificationEngine,
    food_log_reader: IFoodLogReader,
) -> None:
    """Subscribe gamification side effects to food events."""
    event_bus.subscribe(FoodLogged, FoodLoggedHandler(engine, food_log_reader).handle)
    event_bus.subscribe(FoodContributed, FoodContributedHandler(engine).handle)


__all__ = ["FoodContributedHandler", "FoodLoggedHandler", "register_gamification_handlers"]
