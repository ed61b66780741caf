"""리포지토리 통합 테스트 (PostgreSQL 테스트 컨테이너)"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.utils.datetime import now_utc
from app.domains.friends.models import Friendship, FriendshipStatus
from app.domains.friends.repository import FriendshipRepository
from app.domains.live_events.models import LiveEvent
from app.domains.live_events.repository import LiveEventRepository
from app.domains.places.models import PointOfInterest
from app.domains.places.repository import PlaceRepository
from app.domains.recommendations.repository import RecommendedPoiRepository
from app.domains.users.repository import UserRepository

pytestmark = pytest.mark.db

NOW = 1_700_000_000


async def _users(session, *names: str) -> None:
    repository = UserRepository(session)
    for name in names:
        await repository.create_if_absent(name)


async def _accept(session, requester: str, addressee: str) -> None:
    await FriendshipRepository(session).create(
        Friendship(
            requester=requester,
            addressee=addressee,
            status=FriendshipStatus.ACCEPTED.value,
            accepted_at=now_utc(),
        )
    )


def _poi(mark_id: str, owner: str, type_: str = "cafe") -> PointOfInterest:
    return PointOfInterest(
        mark_id=mark_id, owner=owner, type=type_, latitude=45.0, longitude=9.0,
        name=mark_id, address="", phone_number="", url="",
    )


class TestUserRepository:
    """사용자 리포지토리 테스트"""

    @pytest.mark.asyncio
    async def test_create_if_absent_once(self, db_session):
        repository = UserRepository(db_session)

        assert await repository.create_if_absent("alice") is True
        assert await repository.create_if_absent("alice") is False
        assert await repository.exists("alice")

    @pytest.mark.asyncio
    async def test_list_usernames_pages(self, db_session):
        await _users(db_session, "carol", "alice", "bob")
        repository = UserRepository(db_session)

        assert list(await repository.list_usernames(skip=0, limit=2)) == [
            "alice",
            "bob",
        ]
        assert list(await repository.list_usernames(skip=2, limit=2)) == ["carol"]

    @pytest.mark.asyncio
    async def test_get_fcm_tokens_skips_missing(self, db_session):
        await _users(db_session, "alice", "bob")
        repository = UserRepository(db_session)
        alice = await repository.get_by_username("alice")
        alice.fcm_token = "t-alice"
        await repository.update(alice)

        tokens = await repository.get_fcm_tokens(["alice", "bob", "ghost"])

        assert tokens == {"alice": "t-alice"}


class TestFriendshipRepository:
    """친구 관계 리포지토리 테스트"""

    @pytest.mark.asyncio
    async def test_friends_in_both_directions(self, db_session):
        # Given
        await _users(db_session, "u", "f1", "f2", "stranger")
        await _accept(db_session, "u", "f1")
        await _accept(db_session, "f2", "u")
        await FriendshipRepository(db_session).create(
            Friendship(requester="stranger", addressee="u")
        )

        # When
        friends = await FriendshipRepository(db_session).list_friend_usernames("u")

        # Then
        assert friends == ["f1", "f2"]

    @pytest.mark.asyncio
    async def test_get_between_any_direction(self, db_session):
        await _users(db_session, "a", "b")
        await FriendshipRepository(db_session).create(
            Friendship(requester="a", addressee="b")
        )
        repository = FriendshipRepository(db_session)

        assert await repository.get_between("b", "a") is not None
        assert await repository.get_pending("b", "a") is None
        assert await repository.get_pending("a", "b") is not None

    @pytest.mark.asyncio
    async def test_self_friendship_rejected_by_database(self, db_session):
        await _users(db_session, "a")

        with pytest.raises(IntegrityError):
            await FriendshipRepository(db_session).create(
                Friendship(requester="a", addressee="a")
            )


class TestPlaceRepository:
    """장소 리포지토리 테스트"""

    @pytest.mark.asyncio
    async def test_list_by_owners_keeps_owner_order(self, db_session):
        # Given
        await _users(db_session, "u", "f1", "f2")
        repository = PlaceRepository(db_session)
        await repository.create(_poi("u-1", "u"))
        await repository.create(_poi("f2-1", "f2"))
        await repository.create(_poi("f1-1", "f1"))

        # When
        pois = await repository.list_by_owners(["f1", "f2", "u"])

        # Then
        assert [poi.mark_id for poi in pois] == ["f1-1", "f2-1", "u-1"]

    @pytest.mark.asyncio
    async def test_list_by_owners_empty(self, db_session):
        assert await PlaceRepository(db_session).list_by_owners([]) == []


class TestRecommendedPoiRepository:
    """알림 이력 리포지토리 테스트"""

    @pytest.mark.asyncio
    async def test_add_if_absent_is_unique_per_user_and_poi(self, db_session):
        # Given
        await _users(db_session, "u", "f1")
        await PlaceRepository(db_session).create(_poi("f1-cafe", "f1"))
        repository = RecommendedPoiRepository(db_session)

        # When
        first = await repository.add_if_absent("u", "f1-cafe", NOW)
        second = await repository.add_if_absent("u", "f1-cafe", NOW + 5)

        # Then
        assert first is not None
        assert second is None
        record = await repository.get("u", "f1-cafe")
        assert record.notificated_date == NOW

    @pytest.mark.asyncio
    async def test_current_and_stale_split(self, db_session):
        """쿨다운 경계(stale_before)는 만료 쪽에 포함"""
        await _users(db_session, "u", "f1")
        places = PlaceRepository(db_session)
        for mark_id in ("recent", "boundary", "old"):
            await places.create(_poi(mark_id, "f1"))
        repository = RecommendedPoiRepository(db_session)
        await repository.add_if_absent("u", "recent", NOW - 1000)
        await repository.add_if_absent("u", "boundary", NOW - 3600)
        await repository.add_if_absent("u", "old", NOW - 4000)

        stale_before = NOW - 3600

        assert await repository.list_current_mark_ids("u", stale_before) == {"recent"}
        stale = await repository.list_stale_by_user("u", stale_before)
        assert {record.mark_id for record in stale} == {"boundary", "old"}

    @pytest.mark.asyncio
    async def test_delete_by_id(self, db_session):
        await _users(db_session, "u", "f1")
        await PlaceRepository(db_session).create(_poi("f1-cafe", "f1"))
        repository = RecommendedPoiRepository(db_session)
        record_id = await repository.add_if_absent("u", "f1-cafe", NOW)

        await repository.delete_by_id(record_id)

        assert await repository.get("u", "f1-cafe") is None


class TestLiveEventRepository:
    """라이브 이벤트 리포지토리 테스트"""

    @pytest.mark.asyncio
    async def test_active_and_expired(self, db_session):
        # Given
        await _users(db_session, "u", "f1")
        repository = LiveEventRepository(db_session)
        for owner, name, expiration in [
            ("f1", "friend-active", NOW + 60),
            ("u", "own-active", NOW + 600),
            ("u", "own-expired", NOW - 1),
        ]:
            await repository.create(
                LiveEvent(owner=owner, name=name, address="x", expiration_date=expiration)
            )

        # When
        active = await repository.list_active_by_owners(["u", "f1"], NOW)
        expired = await repository.list_expired_by_owner("u", NOW)

        # Then
        assert [event.name for event in active] == ["own-active", "friend-active"]
        assert [event.name for event in expired] == ["own-expired"]
