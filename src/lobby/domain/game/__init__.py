"""Game domain - games that rooms can be opened for.

Registrations are created by an administrative flow and are read-only
for the room lifecycle: a room copies its capacity bounds from them.
"""

from lobby.domain.game.entities import GameRegistration
from lobby.domain.game.exceptions import (
    GameAlreadyRegisteredError,
    GameNotFoundError,
    InvalidGameRegistrationError,
)
from lobby.domain.game.repositories import GameRegistrationRepository

__all__ = [
    "GameAlreadyRegisteredError",
    "GameNotFoundError",
    "GameRegistration",
    "GameRegistrationRepository",
    "InvalidGameRegistrationError",
]
