"""Game registration repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from lobby.domain.game.entities.game_registration import GameRegistration


class GameRegistrationRepository(ABC):
    """Repository interface for GameRegistration entities."""

    @abstractmethod
    async def find_by_id(self, game_id: UUID) -> Optional[GameRegistration]:
        """Find a game registration by ID, or None."""

    @abstractmethod
    async def register_game(self, game: GameRegistration) -> GameRegistration:
        """
        Persist a new game registration.

        Raises
        ------
        GameAlreadyRegisteredError
            If the unique name is already taken
        """

    @abstractmethod
    async def exists_by_unique_name(self, unique_name: str) -> bool:
        """Check whether a game with this unique name is registered."""

    @abstractmethod
    async def find_all(self) -> list[GameRegistration]:
        """Return all registered games ordered by display name."""

    @abstractmethod
    async def update_game(self, game: GameRegistration) -> GameRegistration:
        """
        Replace the stored registration that has the same ID.

        Raises
        ------
        GameNotFoundError
            If no registration with this ID exists
        GameAlreadyRegisteredError
            If another game already uses the unique name
        """
