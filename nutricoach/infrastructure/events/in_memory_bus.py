"""In-memory event bus implementation.

Handlers are stored in memory and awaited in subscription order.
"""

from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

import structlog

from nutricoach.domain.shared.events.base import DomainEvent

logger = structlog.get_logger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe
    Persistence: Handlers lost on process restart
    Error handling: Failed handlers are logged and don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>> bus.subscribe(FoodLogged, food_logged_handler.handle)
        >>> await bus.publish(FoodLogged.create("user123", date.today(), "Arroz"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            Same handler can be subscribed multiple times (will be called multiple times)
        """
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "Handler subscribed",
            event_type=event_type.__name__,
            handler=_handler_name(handler),
        )

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        A failing handler is logged with its traceback; the remaining
        handlers still run.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            logger.debug("No handlers for event", event_type=event_type.__name__)
            return

        logger.info(
            "Publishing event",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in list(handlers):
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler=_handler_name(handler),
                    error=str(e),
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            event_type=event_type.__name__,
            handler=_handler_name(handler),
        )
        return True

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        return len(self._handlers.get(event_type, []))


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
