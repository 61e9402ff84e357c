"""Integration tests for RoomRepositorySQLAlchemy."""

from datetime import timedelta

import pytest

from lobby.domain.room import (
    HostAlreadyInRoomError,
    Player,
    PlayerAlreadyInRoomError,
    Room,
    RoomNotFoundError,
    RoomStatus,
)
from lobby.domain.shared import ConcurrencyError
from lobby.infrastructure.persistence.sqlalchemy.repositories import (
    RoomRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import (
    TestGameFactory,
    TestRoomFactory,
    TestUserFactory,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(async_session, seeded):
    return RoomRepositorySQLAlchemy(async_session)


@pytest.fixture
def alice_room():
    return TestRoomFactory.waiting_room(TestUserFactory.alice_user(), password="1234")


def _numbered_player(n: int) -> Player:
    return Player.from_user(TestUserFactory.numbered_user(n))


class TestRoomRepositoryRoundTrip:
    @pytest.mark.asyncio
    async def test_create_and_find(self, repo, alice_room):
        await repo.create(alice_room)

        room = await repo.find_by_id(alice_room.id)

        assert room == alice_room
        assert room.name == "Test Room"
        assert room.game == TestGameFactory.mahjong()
        assert room.game.display_name == "麻將-Python"
        assert room.host.id == TestUserFactory.ALICE_ID
        assert [p.id for p in room.players] == [TestUserFactory.ALICE_ID]
        assert room.password == "1234"
        assert room.is_locked
        assert room.status == RoomStatus.WAITING
        assert room.version == 0
        assert room.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, repo, alice_room):
        assert await repo.find_by_id(alice_room.id) is None

    @pytest.mark.asyncio
    async def test_update_persists_players_in_join_order(self, repo, alice_room):
        await repo.create(alice_room)
        room = await repo.find_by_id(alice_room.id)

        room.add_player(_numbered_player(2))
        room.add_player(_numbered_player(1))
        room.get_ready(TestUserFactory.numbered_id(1))
        updated = await repo.update(room)

        found = await repo.find_by_id(alice_room.id)
        assert updated.version == 1
        assert found.version == 1
        assert [p.nickname for p in found.players] == ["alice", "player2", "player1"]
        assert found.find_player(TestUserFactory.numbered_id(1)).readiness is True
        assert found.find_player(TestUserFactory.numbered_id(2)).readiness is False

    @pytest.mark.asyncio
    async def test_update_removes_left_players(self, repo, alice_room):
        alice_room.add_player(_numbered_player(1))
        alice_room.add_player(_numbered_player(2))
        await repo.create(alice_room)
        room = await repo.find_by_id(alice_room.id)

        room.leave_room(TestUserFactory.numbered_id(1))
        await repo.update(room)

        found = await repo.find_by_id(alice_room.id)
        assert [p.nickname for p in found.players] == ["alice", "player2"]
        assert not await repo.has_player_joined_room(TestUserFactory.numbered_id(1))

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repo, alice_room):
        alice_room.add_player(_numbered_player(1))
        await repo.create(alice_room)

        await repo.delete_by_id(alice_room.id)

        assert await repo.find_by_id(alice_room.id) is None
        assert not await repo.has_player_joined_room(TestUserFactory.ALICE_ID)
        assert not await repo.has_player_joined_room(TestUserFactory.numbered_id(1))

    @pytest.mark.asyncio
    async def test_delete_missing_room_is_ignored(self, repo, alice_room):
        await repo.delete_by_id(alice_room.id)

    @pytest.mark.asyncio
    async def test_delete_all(self, repo, alice_room):
        await repo.create(alice_room)

        await repo.delete_all()

        page = await repo.find_by_status(RoomStatus.WAITING, 0, 10)
        assert page.total == 0


class TestRoomRepositoryMembership:
    @pytest.mark.asyncio
    async def test_has_player_joined_room(self, repo, alice_room):
        await repo.create(alice_room)

        assert await repo.has_player_joined_room(TestUserFactory.ALICE_ID)
        assert not await repo.has_player_joined_room(TestUserFactory.BOB_ID)

    @pytest.mark.asyncio
    async def test_closed_room_does_not_count_as_joined(self, repo, alice_room):
        closed = Room.reconstitute(
            id=alice_room.id,
            game=alice_room.game,
            host=alice_room.host,
            name=alice_room.name,
            min_players=alice_room.min_players,
            max_players=alice_room.max_players,
            players=alice_room.players,
            password=alice_room.password,
            status=RoomStatus.CLOSED,
            version=0,
            created_at=alice_room.created_at,
        )
        await repo.create(closed)

        assert not await repo.has_player_joined_room(TestUserFactory.ALICE_ID)

    @pytest.mark.asyncio
    async def test_second_room_for_same_host_rejected(self, repo, alice_room):
        await repo.create(alice_room)

        with pytest.raises(HostAlreadyInRoomError):
            await repo.create(
                TestRoomFactory.waiting_room(TestUserFactory.alice_user()),
            )

    @pytest.mark.asyncio
    async def test_player_in_two_rooms_rejected(self, repo, alice_room):
        """The storage refuses a second membership even without a prior check."""
        await repo.create(alice_room)
        bob_room = TestRoomFactory.waiting_room(TestUserFactory.bob_user())
        await repo.create(bob_room)

        room = await repo.find_by_id(bob_room.id)
        room.add_player(Player.from_user(TestUserFactory.alice_user()))

        with pytest.raises(PlayerAlreadyInRoomError) as exc_info:
            await repo.update(room)

        assert str(TestUserFactory.ALICE_ID) in str(exc_info.value)


class TestRoomRepositoryConcurrency:
    @pytest.mark.asyncio
    async def test_stale_version_rejected(self, repo, alice_room):
        await repo.create(alice_room)
        first = await repo.find_by_id(alice_room.id)
        second = await repo.find_by_id(alice_room.id)

        first.add_player(_numbered_player(1))
        await repo.update(first)

        second.add_player(_numbered_player(2))
        with pytest.raises(ConcurrencyError):
            await repo.update(second)

        found = await repo.find_by_id(alice_room.id)
        assert found.current_players == 2
        assert found.version == 1

    @pytest.mark.asyncio
    async def test_stale_version_across_sessions(self, async_session_maker, seeded):
        """Two requests load the same room; only the first write wins."""
        room = TestRoomFactory.waiting_room(TestUserFactory.alice_user())
        async with async_session_maker() as session:
            await RoomRepositorySQLAlchemy(session).create(room)
            await session.commit()

        async with (
            async_session_maker() as session_a,
            async_session_maker() as session_b,
        ):
            repo_a = RoomRepositorySQLAlchemy(session_a)
            repo_b = RoomRepositorySQLAlchemy(session_b)
            room_a = await repo_a.find_by_id(room.id)
            room_b = await repo_b.find_by_id(room.id)

            room_a.add_player(_numbered_player(1))
            await repo_a.update(room_a)
            await session_a.commit()

            room_b.add_player(_numbered_player(2))
            with pytest.raises(ConcurrencyError):
                await repo_b.update(room_b)
            await session_b.rollback()

    @pytest.mark.asyncio
    async def test_update_missing_room_raises(self, repo, alice_room):
        with pytest.raises(RoomNotFoundError):
            await repo.update(alice_room)


class TestRoomRepositoryPaging:
    @pytest.mark.asyncio
    async def test_find_by_status_pages_oldest_first(self, repo):
        game = TestGameFactory.mahjong()
        base = TestRoomFactory.waiting_room(TestUserFactory.alice_user()).created_at
        rooms = []
        for n in range(1, 6):
            host = Player.from_user(TestUserFactory.numbered_user(n))
            room = Room(
                game=game,
                host=Player(host.id, host.nickname),
                name=f"Room {n}",
                min_players=2,
                max_players=4,
                players=[host],
                created_at=base + timedelta(seconds=n),
            )
            rooms.append(room)
        # Insert newest first to prove ordering comes from created_at
        for room in reversed(rooms):
            await repo.create(room)

        first = await repo.find_by_status(RoomStatus.WAITING, 0, 2)
        last = await repo.find_by_status(RoomStatus.WAITING, 2, 2)

        assert first.total == 5
        assert [r.name for r in first.data] == ["Room 1", "Room 2"]
        assert first.has_next
        assert [r.name for r in last.data] == ["Room 5"]
        assert not last.has_next

    @pytest.mark.asyncio
    async def test_find_by_status_filters(self, repo, alice_room):
        await repo.create(alice_room)

        page = await repo.find_by_status(RoomStatus.PLAYING, 0, 10)

        assert page.total == 0
        assert page.data == []
