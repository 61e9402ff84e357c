"""Application ports - what the use-cases need from the outside."""

from lobby.application.ports.event_bus import EventBus
from lobby.application.ports.identity import CurrentUser

__all__ = ["CurrentUser", "EventBus"]
