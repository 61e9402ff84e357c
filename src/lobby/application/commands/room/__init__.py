"""Room lifecycle commands."""

from lobby.application.commands.room.close_room_command import CloseRoomCommand
from lobby.application.commands.room.create_room_command import CreateRoomCommand
from lobby.application.commands.room.join_room_command import JoinRoomCommand
from lobby.application.commands.room.leave_room_command import LeaveRoomCommand
from lobby.application.commands.room.readiness_commands import (
    CancelReadyCommand,
    GetReadyCommand,
)

__all__ = [
    "CancelReadyCommand",
    "CloseRoomCommand",
    "CreateRoomCommand",
    "GetReadyCommand",
    "JoinRoomCommand",
    "LeaveRoomCommand",
]
