"""Room aggregate - membership, lock and capacity of a game room."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from lobby.domain.game.entities import GameRegistration
from lobby.domain.room.entities import Player
from lobby.domain.room.exceptions import (
    InvalidRoomCapacityError,
    InvalidRoomPasswordError,
    NotRoomHostError,
    PlayerAlreadyInRoomError,
    PlayerNotJoinedError,
    RoomFullError,
)
from lobby.domain.room.value_objects import RoomStatus
from lobby.domain.shared.time import utc_now

ROOM_PASSWORD_PATTERN = re.compile(r"[0-9]{4}")


class Room:
    """
    Room aggregate root.

    Invariants held after every mutation:
    - players are unique by id and kept in join order
    - len(players) <= max_players
    - the host is one of the players for as long as the room exists

    Mutations validate their own preconditions and raise before touching
    state, so a failed call leaves the room unchanged. Cross-room rules
    (a user plays in one room at a time) are the caller's concern.
    """

    def __init__(  # NOQA: PLR0913
        self,
        game: GameRegistration,
        host: Player,
        name: str,
        min_players: int,
        max_players: int,
        players: Optional[Iterable[Player]] = None,
        password: Optional[str] = None,
        status: RoomStatus = RoomStatus.WAITING,
        id: Optional[UUID] = None,
        version: int = 0,
        created_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._game = game
        self._host = host
        self._name = name
        self._min_players = min_players
        self._max_players = max_players
        self._players: list[Player] = list(players) if players is not None else []
        self._password = password
        self._status = status
        self._version = version
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def game(self) -> GameRegistration:
        return self._game

    @property
    def host(self) -> Player:
        return self._host

    @property
    def name(self) -> str:
        return self._name

    @property
    def min_players(self) -> int:
        return self._min_players

    @property
    def max_players(self) -> int:
        return self._max_players

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    @property
    def current_players(self) -> int:
        return len(self._players)

    @property
    def password(self) -> Optional[str]:
        return self._password

    @property
    def is_locked(self) -> bool:
        return bool(self._password)

    @property
    def status(self) -> RoomStatus:
        return self._status

    @property
    def version(self) -> int:
        return self._version

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def is_full(self) -> bool:
        return len(self._players) >= self._max_players

    def is_empty(self) -> bool:
        return not self._players

    def is_password_correct(self, candidate: Optional[str]) -> bool:
        # Unlocked rooms ignore whatever password was supplied.
        if not self.is_locked:
            return True
        return candidate == self._password

    def is_host(self, user_id: UUID) -> bool:
        return self._host.id == user_id

    def has_player(self, player_id: UUID) -> bool:
        return self.find_player(player_id) is not None

    def find_player(self, player_id: UUID) -> Optional[Player]:
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    def add_player(self, player: Player) -> None:
        if self.has_player(player.id):
            raise PlayerAlreadyInRoomError(player.id)
        if self.is_full():
            raise RoomFullError(self._id)
        self._players.append(player)

    def leave_room(self, player_id: UUID) -> Player:
        player = self._require_player(player_id)
        self._players.remove(player)
        return player

    def validate_room_host(self, user_id: UUID) -> None:
        if not self.is_host(user_id):
            raise NotRoomHostError(user_id)

    def get_ready(self, player_id: UUID) -> Player:
        player = self._require_player(player_id)
        player.get_ready()
        return player

    def cancel_ready(self, player_id: UUID) -> Player:
        player = self._require_player(player_id)
        player.cancel_ready()
        return player

    def _require_player(self, player_id: UUID) -> Player:
        player = self.find_player(player_id)
        if player is None:
            raise PlayerNotJoinedError(player_id, self._id)
        return player

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        game: GameRegistration,
        host: Player,
        name: str,
        min_players: int,
        max_players: int,
        password: Optional[str] = None,
    ) -> Room:
        """Open a WAITING room for a game with the host as its only player.

        An empty or missing password opens an unlocked room; otherwise the
        password must be exactly four digits.
        """
        if password and not ROOM_PASSWORD_PATTERN.fullmatch(password):
            raise InvalidRoomPasswordError()
        if not game.accepts_capacity(min_players, max_players):
            raise InvalidRoomCapacityError(
                min_players,
                max_players,
                game.min_players,
                game.max_players,
            )
        return cls(
            game=game,
            host=Player(host.id, host.nickname),
            name=name,
            min_players=min_players,
            max_players=max_players,
            players=[host],
            password=password or None,
            status=RoomStatus.WAITING,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        game: GameRegistration,
        host: Player,
        name: str,
        min_players: int,
        max_players: int,
        players: Iterable[Player],
        password: Optional[str],
        status: RoomStatus,
        version: int,
        created_at: datetime,
    ) -> Room:
        return cls(
            id=id,
            game=game,
            host=host,
            name=name,
            min_players=min_players,
            max_players=max_players,
            players=players,
            password=password,
            status=status,
            version=version,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Room(id={self._id}, name={self._name!r}, "
            f"players={len(self._players)}/{self._max_players}, "
            f"status={self._status.value})"
        )
