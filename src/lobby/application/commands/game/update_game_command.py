"""Change the details and player bounds of a registered game."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from lobby.domain.game import (
    GameAlreadyRegisteredError,
    GameNotFoundError,
    GameRegistration,
    GameRegistrationRepository,
)

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateGameCommand:
    """Replace every field of an existing game registration.

    Rooms already open for the game keep the bounds they were created
    with; the new bounds apply to rooms created afterwards.
    """

    def __init__(self, game_registration_repository: GameRegistrationRepository):
        self._game_repo = game_registration_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateGameCommand:
        return cls(
            game_registration_repository=factory.game_registration_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        game_id: UUID,
        unique_name: str,
        display_name: str,
        min_players: int,
        max_players: int,
        short_description: str = "",
        rule: str = "",
        image_url: str = "",
        front_end_url: str = "",
        back_end_url: str = "",
    ) -> GameRegistration:
        current = await self._game_repo.find_by_id(game_id)
        if current is None:
            raise GameNotFoundError(game_id)

        renamed = unique_name != current.unique_name
        if renamed and await self._game_repo.exists_by_unique_name(unique_name):
            raise GameAlreadyRegisteredError(unique_name)

        # Construction re-validates the player bounds
        game = GameRegistration(
            id=game_id,
            unique_name=unique_name,
            display_name=display_name,
            min_players=min_players,
            max_players=max_players,
            short_description=short_description,
            rule=rule,
            image_url=image_url,
            front_end_url=front_end_url,
            back_end_url=back_end_url,
        )

        game = await self._game_repo.update_game(game)
        logger.info(
            "Game updated: %s (%d-%d players)",
            game.unique_name,
            game.min_players,
            game.max_players,
        )
        return game
