"""Event bus port."""

from abc import ABC, abstractmethod

from lobby.domain.room.events import DomainEvent


class EventBus(ABC):
    """Receives domain events after a mutation has been persisted."""

    @abstractmethod
    async def publish(self, *events: DomainEvent) -> None:
        """Publish events in order."""
