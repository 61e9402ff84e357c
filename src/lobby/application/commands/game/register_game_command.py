"""Register a game that rooms can be opened for."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lobby.domain.game import (
    GameAlreadyRegisteredError,
    GameRegistration,
    GameRegistrationRepository,
)

if TYPE_CHECKING:
    from lobby.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class RegisterGameCommand:
    """Validate and persist a new game registration."""

    def __init__(self, game_registration_repository: GameRegistrationRepository):
        self._game_repo = game_registration_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RegisterGameCommand:
        return cls(
            game_registration_repository=factory.game_registration_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
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
        if await self._game_repo.exists_by_unique_name(unique_name):
            raise GameAlreadyRegisteredError(unique_name)

        game = GameRegistration(
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

        game = await self._game_repo.register_game(game)
        logger.info(
            "Game registered: %s (%d-%d players)",
            game.unique_name,
            game.min_players,
            game.max_players,
        )
        return game
