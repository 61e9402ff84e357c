"""Game registration entity."""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from lobby.domain.game.exceptions import InvalidGameRegistrationError


class GameRegistration:
    """A playable game that rooms can be opened for.

    The player bounds are fixed at registration time and constrain every
    room created for the game.
    """

    def __init__(  # NOQA: PLR0913
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
        id: Optional[UUID] = None,
    ):
        if min_players <= 0 or max_players <= 0 or min_players > max_players:
            raise InvalidGameRegistrationError(min_players, max_players)

        self._id = id if id is not None else uuid4()
        self._unique_name = unique_name
        self._display_name = display_name
        self._min_players = min_players
        self._max_players = max_players
        self._short_description = short_description
        self._rule = rule
        self._image_url = image_url
        self._front_end_url = front_end_url
        self._back_end_url = back_end_url

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def unique_name(self) -> str:
        return self._unique_name

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def min_players(self) -> int:
        return self._min_players

    @property
    def max_players(self) -> int:
        return self._max_players

    @property
    def short_description(self) -> str:
        return self._short_description

    @property
    def rule(self) -> str:
        return self._rule

    @property
    def image_url(self) -> str:
        return self._image_url

    @property
    def front_end_url(self) -> str:
        return self._front_end_url

    @property
    def back_end_url(self) -> str:
        return self._back_end_url

    def accepts_capacity(self, min_players: int, max_players: int) -> bool:
        """Tell whether room bounds lie within this game's bounds."""
        return (
            self._min_players <= min_players <= max_players <= self._max_players
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameRegistration):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"GameRegistration(id={self._id}, unique_name={self._unique_name!r}, "
            f"players={self._min_players}-{self._max_players})"
        )
