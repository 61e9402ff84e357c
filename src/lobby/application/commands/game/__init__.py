"""Game registration commands."""

from lobby.application.commands.game.register_game_command import (
    RegisterGameCommand,
)
from lobby.application.commands.game.update_game_command import UpdateGameCommand

__all__ = ["RegisterGameCommand", "UpdateGameCommand"]
