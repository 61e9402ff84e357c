"""Game repository interfaces."""

from lobby.domain.game.repositories.game_registration_repository import (
    GameRegistrationRepository,
)

__all__ = ["GameRegistrationRepository"]
