"""Game entities."""

from lobby.domain.game.entities.game_registration import GameRegistration

__all__ = ["GameRegistration"]
