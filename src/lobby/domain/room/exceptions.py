"""Room domain exceptions.

Messages are user-facing and stable; each failure of the room lifecycle
has its own type so callers can tell them apart without string matching.
"""

from typing import Any

from lobby.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class RoomNotFoundError(EntityNotFoundError):
    """Raised when a room cannot be found."""

    def __init__(self, room_id: Any = None) -> None:
        super().__init__("Room", "id", room_id, code=ErrorCode.ROOM_NOT_FOUND)


class WrongPasswordError(BusinessRuleViolation):
    """Raised when joining a locked room with a mismatching password."""

    def __init__(self, room_id: Any = None) -> None:
        super().__init__(
            "wrong password",
            code=ErrorCode.ROOM_PASSWORD_INCORRECT,
            details={"room_id": str(room_id) if room_id else None},
        )


class RoomFullError(BusinessRuleViolation):
    """Raised when joining a room that already holds max_players."""

    def __init__(self, room_id: Any) -> None:
        super().__init__(
            f"The room ({room_id}) is full. "
            "Please select another room or try again later.",
            code=ErrorCode.ROOM_FULL,
            details={"room_id": str(room_id)},
        )


class PlayerAlreadyInRoomError(BusinessRuleViolation):
    """Raised when a user who already plays in a room tries to join another."""

    def __init__(self, player_id: Any) -> None:
        super().__init__(
            f"Player({player_id}) has joined another room.",
            code=ErrorCode.PLAYER_JOIN_ROOM_ERROR,
            details={"player_id": str(player_id)},
        )


class HostAlreadyInRoomError(BusinessRuleViolation):
    """Raised when a user who already plays in a room tries to create one."""

    def __init__(self, user_id: Any = None) -> None:
        super().__init__(
            "A user can only create one room at a time.",
            code=ErrorCode.HOST_ALREADY_IN_ROOM,
            details={"user_id": str(user_id) if user_id else None},
        )


class PlayerNotJoinedError(BusinessRuleViolation):
    """Raised when an operation requires membership the user does not have."""

    def __init__(self, player_id: Any = None, room_id: Any = None) -> None:
        super().__init__(
            "Player not joined",
            code=ErrorCode.PLAYER_NOT_JOINED,
            details={
                "player_id": str(player_id) if player_id else None,
                "room_id": str(room_id) if room_id else None,
            },
        )


class NotRoomHostError(BusinessRuleViolation):
    """Raised when a host-only operation is requested by another player."""

    def __init__(self, player_id: Any) -> None:
        super().__init__(
            f"Player({player_id}) is not the host",
            code=ErrorCode.NOT_ROOM_HOST,
            details={"player_id": str(player_id)},
        )


class InvalidRoomPasswordError(ValidationError):
    """Raised when a room is opened with a password that is not 4 digits."""

    def __init__(self) -> None:
        super().__init__(
            message="The length must be 4 and can only contain digits.",
            code=ErrorCode.INVALID_ROOM_PASSWORD,
        )


class InvalidRoomCapacityError(ValidationError):
    """Raised when requested room bounds fall outside the game's bounds."""

    def __init__(
        self,
        min_players: int,
        max_players: int,
        game_min_players: int,
        game_max_players: int,
    ) -> None:
        super().__init__(
            message=(
                f"Room capacity {min_players}-{max_players} is outside the "
                f"game's bounds {game_min_players}-{game_max_players}"
            ),
            code=ErrorCode.INVALID_ROOM_CAPACITY,
            details={
                "min_players": min_players,
                "max_players": max_players,
                "game_min_players": game_min_players,
                "game_max_players": game_max_players,
            },
        )
