"""SQLAlchemy implementation of GameRegistrationRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lobby.domain.game import (
    GameAlreadyRegisteredError,
    GameNotFoundError,
    GameRegistration,
    GameRegistrationRepository,
)
from lobby.infrastructure.persistence.sqlalchemy.models import GameRegistrationModel

logger = logging.getLogger(__name__)


class GameRegistrationRepositorySQLAlchemy(GameRegistrationRepository):
    """SQLAlchemy implementation of GameRegistrationRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, game_id: UUID) -> Optional[GameRegistration]:
        stmt = select(GameRegistrationModel).where(GameRegistrationModel.id == game_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def register_game(self, game: GameRegistration) -> GameRegistration:
        self._session.add(self._map_to_model(game))
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                "Game %s rejected by the store: %s",
                game.unique_name,
                e.orig,
            )
            raise GameAlreadyRegisteredError(game.unique_name) from e

        logger.info("Registered game: %s (%s)", game.unique_name, game.id)
        return game

    async def update_game(self, game: GameRegistration) -> GameRegistration:
        model = await self._session.get(GameRegistrationModel, game.id)
        if model is None:
            raise GameNotFoundError(game.id)

        self._update_model(model, game)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                "Update of game %s rejected by the store: %s",
                game.id,
                e.orig,
            )
            raise GameAlreadyRegisteredError(game.unique_name) from e

        logger.info("Updated game: %s (%s)", game.unique_name, game.id)
        return game

    async def exists_by_unique_name(self, unique_name: str) -> bool:
        stmt = select(
            exists().where(GameRegistrationModel.unique_name == unique_name),
        )
        return bool(await self._session.scalar(stmt))

    async def find_all(self) -> list[GameRegistration]:
        stmt = select(GameRegistrationModel).order_by(
            GameRegistrationModel.display_name,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _map_to_domain(model: GameRegistrationModel) -> GameRegistration:
        return GameRegistration(
            id=model.id,
            unique_name=model.unique_name,
            display_name=model.display_name,
            min_players=model.min_players,
            max_players=model.max_players,
            short_description=model.short_description,
            rule=model.rule,
            image_url=model.image_url,
            front_end_url=model.front_end_url,
            back_end_url=model.back_end_url,
        )

    @staticmethod
    def _update_model(model: GameRegistrationModel, game: GameRegistration):
        model.unique_name = game.unique_name
        model.display_name = game.display_name
        model.min_players = game.min_players
        model.max_players = game.max_players
        model.short_description = game.short_description
        model.rule = game.rule
        model.image_url = game.image_url
        model.front_end_url = game.front_end_url
        model.back_end_url = game.back_end_url

    @staticmethod
    def _map_to_model(game: GameRegistration) -> GameRegistrationModel:
        return GameRegistrationModel(
            id=game.id,
            unique_name=game.unique_name,
            display_name=game.display_name,
            min_players=game.min_players,
            max_players=game.max_players,
            short_description=game.short_description,
            rule=game.rule,
            image_url=game.image_url,
            front_end_url=game.front_end_url,
            back_end_url=game.back_end_url,
        )
