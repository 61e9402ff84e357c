"""Open a new room for a registered game."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lobby.application.commands.room._room_command import RoomCommand
from lobby.domain.game import GameNotFoundError, GameRegistrationRepository
from lobby.domain.room import (
    HostAlreadyInRoomError,
    Player,
    Room,
    RoomCreated,
    RoomRepository,
)
from lobby.domain.shared import ErrorCode
from lobby.domain.user import UserRepository

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory
    from lobby.application.ports import CurrentUser, EventBus

logger = logging.getLogger(__name__)


class CreateRoomCommand(RoomCommand):
    """Create a WAITING room hosted by the current user."""

    def __init__(  # NOQA: PLR0913
        self,
        room_repository: RoomRepository,
        user_repository: UserRepository,
        game_registration_repository: GameRegistrationRepository,
        event_bus: EventBus,
        current_user: CurrentUser,
    ):
        super().__init__(room_repository, user_repository, current_user)
        self._game_repo = game_registration_repository
        self._event_bus = event_bus

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateRoomCommand:
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_repository(),
            game_registration_repository=factory.game_registration_repository(),
            event_bus=factory.event_bus(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        game_id: UUID,
        name: str,
        min_players: Optional[int] = None,
        max_players: Optional[int] = None,
        password: Optional[str] = None,
    ) -> Room:
        game = await self._game_repo.find_by_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id)

        host = await self._find_current_user()

        if await self._room_repo.has_player_joined_room(host.id):
            logger.info(
                "User %s already plays in a room, refusing to create: %s",
                host.id,
                ErrorCode.HOST_ALREADY_IN_ROOM.value,
            )
            raise HostAlreadyInRoomError(host.id)

        # Bounds default to the game's own bounds; Room.create validates them
        room = Room.create(
            game=game,
            host=Player.from_user(host),
            name=name,
            min_players=min_players if min_players is not None else game.min_players,
            max_players=max_players if max_players is not None else game.max_players,
            password=password,
        )

        room = await self._room_repo.create(room)
        logger.info(
            "Room created: %s (game: %s, host: %s, locked: %s)",
            room.id,
            game.unique_name,
            host.id,
            room.is_locked,
        )

        await self._event_bus.publish(RoomCreated.from_room(room))
        return room
