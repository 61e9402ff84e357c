"""SQLAlchemy implementation of RoomRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from lobby.domain.room import (
    HostAlreadyInRoomError,
    Player,
    PlayerAlreadyInRoomError,
    Room,
    RoomNotFoundError,
    RoomRepository,
    RoomStatus,
)
from lobby.domain.shared import ConcurrencyError, Pagination
from lobby.domain.shared.time import ensure_tz_aware
from lobby.infrastructure.persistence.sqlalchemy.models import (
    RoomModel,
    RoomPlayerModel,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories.game_registration_repository import (  # NOQA: E501
    GameRegistrationRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class RoomRepositorySQLAlchemy(RoomRepository):
    """SQLAlchemy implementation of RoomRepository.

    Players live in ``room_players`` and are written together with their
    room. Writes are guarded twice: the ``version`` column rejects updates
    based on a stale snapshot, and the unique ``player_id`` column rejects
    a user sitting in two rooms.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, room_id: UUID) -> Optional[Room]:
        model = await self._find_model_by_id(room_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def create(self, room: Room) -> Room:
        model = self._map_to_model(room)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning("Room %s rejected by the store: %s", room.id, e.orig)
            raise HostAlreadyInRoomError(room.host.id) from e

        logger.info("Created room: %s (%s)", room.id, room.name)
        return room

    async def update(self, room: Room) -> Room:
        model = await self._find_model_by_id(room.id)
        if model is None:
            raise RoomNotFoundError(room.id)
        if model.version != room.version:
            logger.warning(
                "Stale update of room %s (version %d, stored %d)",
                room.id,
                room.version,
                model.version,
            )
            raise self._concurrency_error(room, model.version)

        new_player_ids = [
            player.id
            for player in room.players
            if player.id not in {p.player_id for p in model.players}
        ]
        self._update_model(model, room)

        try:
            await self._session.flush()
        except StaleDataError as e:
            logger.warning("Room %s changed during update", room.id)
            raise self._concurrency_error(room) from e
        except IntegrityError as e:
            logger.warning("Room %s rejected by the store: %s", room.id, e.orig)
            raise PlayerAlreadyInRoomError(
                new_player_ids[0] if new_player_ids else None,
            ) from e

        logger.debug("Updated room: %s (version %d)", room.id, model.version)
        return self._map_to_domain(model)

    async def delete_by_id(self, room_id: UUID) -> None:
        await self._session.execute(
            delete(RoomPlayerModel).where(RoomPlayerModel.room_id == room_id),
        )
        result = await self._session.execute(
            delete(RoomModel).where(RoomModel.id == room_id),
        )
        await self._session.flush()

        if result.rowcount:
            logger.info("Deleted room: %s", room_id)

    async def delete_all(self) -> None:
        await self._session.execute(delete(RoomPlayerModel))
        await self._session.execute(delete(RoomModel))
        await self._session.flush()
        logger.info("Deleted all rooms")

    async def find_by_status(
        self,
        status: RoomStatus,
        page: int,
        offset: int,
    ) -> Pagination[Room]:
        count_stmt = (
            select(func.count())
            .select_from(RoomModel)
            .where(RoomModel.status == status.value)
        )
        total = await self._session.scalar(count_stmt) or 0

        stmt = (
            select(RoomModel)
            .where(RoomModel.status == status.value)
            .order_by(RoomModel.created_at, RoomModel.id)
            .offset(page * offset)
            .limit(offset)
        )
        result = await self._session.execute(stmt)
        rooms = [self._map_to_domain(model) for model in result.scalars().all()]

        return Pagination(page=page, offset=offset, total=total, data=rooms)

    async def has_player_joined_room(self, user_id: UUID) -> bool:
        open_statuses = [s.value for s in RoomStatus if s.is_open()]
        stmt = select(
            exists()
            .where(RoomPlayerModel.player_id == user_id)
            .where(RoomModel.id == RoomPlayerModel.room_id)
            .where(RoomModel.status.in_(open_statuses)),
        )
        return bool(await self._session.scalar(stmt))

    async def _find_model_by_id(self, room_id: UUID) -> Optional[RoomModel]:
        # populate_existing: always read the stored version
        stmt = (
            select(RoomModel)
            .where(RoomModel.id == room_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _concurrency_error(
        room: Room,
        stored_version: Optional[int] = None,
    ) -> ConcurrencyError:
        return ConcurrencyError(
            f"Room {room.id} was modified by another request",
            details={
                "room_id": str(room.id),
                "expected_version": room.version,
                "stored_version": stored_version,
            },
        )

    def _map_to_domain(self, model: RoomModel) -> Room:
        return Room.reconstitute(
            id=model.id,
            game=GameRegistrationRepositorySQLAlchemy._map_to_domain(model.game),
            host=Player(model.host_id, model.host_nickname),
            name=model.name,
            min_players=model.min_players,
            max_players=model.max_players,
            players=[
                Player(p.player_id, p.nickname, readiness=p.readiness)
                for p in model.players
            ],
            password=model.password,
            status=RoomStatus(model.status),
            version=model.version,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_model(self, room: Room) -> RoomModel:
        return RoomModel(
            id=room.id,
            game_id=room.game.id,
            host_id=room.host.id,
            host_nickname=room.host.nickname,
            name=room.name,
            password=room.password,
            status=room.status.value,
            min_players=room.min_players,
            max_players=room.max_players,
            version=room.version,
            created_at=room.created_at,
            players=[
                RoomPlayerModel(
                    room_id=room.id,
                    player_id=player.id,
                    nickname=player.nickname,
                    readiness=player.readiness,
                    position=position,
                )
                for position, player in enumerate(room.players)
            ],
        )

    def _update_model(self, model: RoomModel, room: Room):
        model.host_id = room.host.id
        model.host_nickname = room.host.nickname
        model.name = room.name
        model.password = room.password
        model.status = room.status.value
        model.min_players = room.min_players
        model.max_players = room.max_players
        # Always bumped, so the version guard also covers player-only changes
        model.version = room.version + 1

        existing = {p.player_id: p for p in model.players}
        players = []
        for position, player in enumerate(room.players):
            player_model = existing.get(player.id)
            if player_model is None:
                player_model = RoomPlayerModel(
                    room_id=room.id,
                    player_id=player.id,
                    nickname=player.nickname,
                )
            player_model.nickname = player.nickname
            player_model.readiness = player.readiness
            player_model.position = position
            players.append(player_model)

        # Players missing from the list are deleted as orphans
        model.players = players
