"""Integration tests for GameRegistrationRepositorySQLAlchemy."""

import pytest

from lobby.domain.game import (
    GameAlreadyRegisteredError,
    GameNotFoundError,
    GameRegistration,
)
from lobby.infrastructure.persistence.sqlalchemy.repositories import (
    GameRegistrationRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestGameFactory

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(async_session):
    return GameRegistrationRepositorySQLAlchemy(async_session)


class TestGameRegistrationRepository:
    @pytest.mark.asyncio
    async def test_register_and_find(self, repo):
        await repo.register_game(TestGameFactory.mahjong())

        game = await repo.find_by_id(TestGameFactory.MAHJONG_ID)

        assert game.unique_name == "Mahjong-python"
        assert game.display_name == "麻將-Python"
        assert (game.min_players, game.max_players) == (2, 4)
        assert game.front_end_url == "https://mahjong.example.com"

    @pytest.mark.asyncio
    async def test_exists_by_unique_name(self, repo):
        await repo.register_game(TestGameFactory.mahjong())

        assert await repo.exists_by_unique_name("Mahjong-python")
        assert not await repo.exists_by_unique_name("Chess")

    @pytest.mark.asyncio
    async def test_duplicate_unique_name_raises(self, repo):
        await repo.register_game(TestGameFactory.mahjong())

        with pytest.raises(GameAlreadyRegisteredError):
            await repo.register_game(
                GameRegistration(
                    unique_name="Mahjong-python",
                    display_name="Copy",
                    min_players=2,
                    max_players=4,
                ),
            )

    @pytest.mark.asyncio
    async def test_update_game_replaces_fields(self, repo):
        await repo.register_game(TestGameFactory.mahjong())

        await repo.update_game(
            GameRegistration(
                id=TestGameFactory.MAHJONG_ID,
                unique_name="Mahjong-python",
                display_name="麻將",
                min_players=3,
                max_players=4,
                rule="Sixteen tiles",
            ),
        )
        game = await repo.find_by_id(TestGameFactory.MAHJONG_ID)

        assert game.display_name == "麻將"
        assert (game.min_players, game.max_players) == (3, 4)
        assert game.rule == "Sixteen tiles"
        assert game.front_end_url == ""

    @pytest.mark.asyncio
    async def test_update_unknown_game_raises(self, repo):
        with pytest.raises(GameNotFoundError):
            await repo.update_game(
                GameRegistration(
                    unique_name="Ghost",
                    display_name="Ghost",
                    min_players=2,
                    max_players=2,
                ),
            )

    @pytest.mark.asyncio
    async def test_update_to_taken_unique_name_raises(self, repo):
        await repo.register_game(TestGameFactory.mahjong())
        big_two = await repo.register_game(
            GameRegistration(
                unique_name="Big2",
                display_name="Big Two",
                min_players=4,
                max_players=4,
            ),
        )

        with pytest.raises(GameAlreadyRegisteredError):
            await repo.update_game(
                GameRegistration(
                    id=big_two.id,
                    unique_name="Mahjong-python",
                    display_name="Big Two",
                    min_players=4,
                    max_players=4,
                ),
            )

    @pytest.mark.asyncio
    async def test_find_all_ordered_by_display_name(self, repo):
        await repo.register_game(TestGameFactory.mahjong())
        await repo.register_game(
            GameRegistration(
                unique_name="Big2",
                display_name="Big Two",
                min_players=4,
                max_players=4,
            ),
        )

        games = await repo.find_all()

        assert [g.unique_name for g in games] == ["Big2", "Mahjong-python"]
