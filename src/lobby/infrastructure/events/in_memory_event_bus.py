"""In-process event bus."""

import logging
from collections import defaultdict
from typing import Awaitable, Callable

from lobby.application.ports.event_bus import EventBus
from lobby.domain.room.events import DomainEvent, RoomEventType

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class InMemoryEventBus(EventBus):
    """Dispatches events to handlers subscribed by event type.

    Every published event is also kept in ``published``, in order, so
    callers without subscribers (and tests) can inspect what happened.
    """

    def __init__(self) -> None:
        self._handlers: dict[RoomEventType, list[EventHandler]] = defaultdict(list)
        self._published: list[DomainEvent] = []

    @property
    def published(self) -> list[DomainEvent]:
        return list(self._published)

    def subscribe(self, event_type: RoomEventType, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: RoomEventType, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    async def publish(self, *events: DomainEvent) -> None:
        for event in events:
            self._published.append(event)
            handlers = list(self._handlers.get(event.event_type, []))
            logger.info(
                "Publishing %s to %d handler(s)",
                event.event_type.value,
                len(handlers),
            )
            for handler in handlers:
                try:
                    await handler(event)
                except Exception:
                    logger.exception(
                        "Handler %r failed for %s",
                        handler,
                        event.event_type.value,
                    )
                    raise

    def clear(self) -> None:
        self._published.clear()
