"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They load
aggregates through repositories, let the aggregates enforce their
invariants, persist the result and return plain domain values.

Commands are organized by domain:
- room: room lifecycle (create, join, leave, close, readiness)
- user: registration of the authenticated principal
- game: administrative game registration and updates
"""

from lobby.application.commands.game import RegisterGameCommand, UpdateGameCommand
from lobby.application.commands.room import (
    CancelReadyCommand,
    CloseRoomCommand,
    CreateRoomCommand,
    GetReadyCommand,
    JoinRoomCommand,
    LeaveRoomCommand,
)
from lobby.application.commands.user import RegisterUserCommand

__all__ = [
    # Room
    "CancelReadyCommand",
    "CloseRoomCommand",
    "CreateRoomCommand",
    "GetReadyCommand",
    "JoinRoomCommand",
    "LeaveRoomCommand",
    # User
    "RegisterUserCommand",
    # Game
    "RegisterGameCommand",
    "UpdateGameCommand",
]
