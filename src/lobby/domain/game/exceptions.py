"""Game registration domain exceptions."""

from lobby.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class GameNotFoundError(EntityNotFoundError):
    """Raised when a game registration cannot be found."""

    def __init__(self, game_id: object = None) -> None:
        super().__init__(
            "GameRegistration",
            "id",
            game_id,
            code=ErrorCode.GAME_NOT_FOUND,
        )


class GameAlreadyRegisteredError(ConflictError):
    """Raised when a game with the same unique name already exists."""

    def __init__(self, unique_name: str) -> None:
        super().__init__(
            f"Game '{unique_name}' is already registered",
            code=ErrorCode.GAME_ALREADY_REGISTERED,
            details={"unique_name": unique_name},
        )


class InvalidGameRegistrationError(ValidationError):
    """Raised when a game's player bounds are inconsistent."""

    def __init__(self, min_players: int, max_players: int) -> None:
        super().__init__(
            message=(
                f"Invalid player bounds ({min_players}-{max_players}): "
                "both must be positive and min_players <= max_players"
            ),
            code=ErrorCode.INVALID_GAME_REGISTRATION,
            details={"min_players": min_players, "max_players": max_players},
        )
