"""Friend Service 단위 테스트"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domains.friends.exceptions import (
    FriendRequestNotFoundException,
    FriendshipAlreadyExistsException,
    FriendshipNotFoundException,
    SelfFriendshipException,
)
from app.domains.friends.models import Friendship, FriendshipStatus
from app.domains.friends.schemas import Friend
from app.domains.friends.service import FriendService
from app.domains.users.exceptions import UserNotFoundException


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.notify_friendship_request = AsyncMock(return_value=True)
    notifier.notify_friendship_confirmation = AsyncMock(return_value=True)
    return notifier


@pytest.fixture
def friend_service(mock_notifier):
    """FriendService 인스턴스"""
    service = FriendService(MagicMock(), mock_notifier)
    service.user_repository.exists = AsyncMock(return_value=True)
    service.user_repository.create_if_absent = AsyncMock(return_value=False)
    service.repository.get_between = AsyncMock(return_value=None)
    service.repository.create = AsyncMock(side_effect=lambda friendship: friendship)
    service.repository.update = AsyncMock(side_effect=lambda friendship: friendship)
    service.repository.delete = AsyncMock()
    return service


class TestGetFriends:
    """친구 목록 테스트"""

    @pytest.mark.asyncio
    async def test_returns_friend_objects_in_order(self, friend_service):
        friend_service.repository.list_friend_usernames = AsyncMock(
            return_value=["bob", "carol"]
        )

        friends = await friend_service.get_friends("alice")

        assert friends == [Friend(friend_username="bob"), Friend(friend_username="carol")]


class TestSendFriendshipRequest:
    """친구 요청 테스트"""

    @pytest.mark.asyncio
    async def test_creates_pending_request_and_notifies(
        self, friend_service, mock_notifier
    ):
        # When
        friendship = await friend_service.send_friendship_request("alice", "bob")

        # Then
        assert friendship.requester == "alice"
        assert friendship.addressee == "bob"
        assert friendship.status == FriendshipStatus.PENDING.value
        friend_service.user_repository.create_if_absent.assert_awaited_once_with(
            "alice"
        )
        mock_notifier.notify_friendship_request.assert_awaited_once_with(
            "alice", "bob"
        )

    @pytest.mark.asyncio
    async def test_self_request_rejected(self, friend_service):
        with pytest.raises(SelfFriendshipException):
            await friend_service.send_friendship_request("alice", "alice")

    @pytest.mark.asyncio
    async def test_unknown_receiver_rejected(self, friend_service):
        friend_service.user_repository.exists = AsyncMock(return_value=False)

        with pytest.raises(UserNotFoundException):
            await friend_service.send_friendship_request("alice", "ghost")

    @pytest.mark.asyncio
    async def test_existing_relation_rejected(self, friend_service, mock_notifier):
        """역방향 요청이 이미 있어도 거부"""
        friend_service.repository.get_between = AsyncMock(
            return_value=Friendship(
                requester="bob", addressee="alice",
                status=FriendshipStatus.PENDING.value,
            )
        )

        with pytest.raises(FriendshipAlreadyExistsException) as exc_info:
            await friend_service.send_friendship_request("alice", "bob")

        assert exc_info.value.detail_info["status"] == "pending"
        friend_service.repository.create.assert_not_awaited()
        mock_notifier.notify_friendship_request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_without_notifier(self):
        service = FriendService(MagicMock())
        service.user_repository.exists = AsyncMock(return_value=True)
        service.user_repository.create_if_absent = AsyncMock(return_value=True)
        service.repository.get_between = AsyncMock(return_value=None)
        service.repository.create = AsyncMock(side_effect=lambda f: f)

        friendship = await service.send_friendship_request("alice", "bob")

        assert friendship.addressee == "bob"


class TestConfirmFriendship:
    """친구 요청 수락 테스트"""

    @pytest.mark.asyncio
    async def test_accepts_pending_request(self, friend_service, mock_notifier):
        # Given
        pending = Friendship(
            requester="alice", addressee="bob", status=FriendshipStatus.PENDING.value
        )
        friend_service.repository.get_pending = AsyncMock(return_value=pending)

        # When
        friendship = await friend_service.confirm_friendship("bob", "alice")

        # Then
        friend_service.repository.get_pending.assert_awaited_once_with("alice", "bob")
        assert friendship.is_accepted
        assert friendship.accepted_at is not None
        mock_notifier.notify_friendship_confirmation.assert_awaited_once_with(
            "bob", "alice"
        )

    @pytest.mark.asyncio
    async def test_missing_request_rejected(self, friend_service, mock_notifier):
        friend_service.repository.get_pending = AsyncMock(return_value=None)

        with pytest.raises(FriendRequestNotFoundException):
            await friend_service.confirm_friendship("bob", "alice")

        mock_notifier.notify_friendship_confirmation.assert_not_awaited()


class TestRemoveFriendship:
    """친구 삭제 테스트"""

    @pytest.mark.asyncio
    async def test_removes_relation(self, friend_service):
        friendship = Friendship(
            requester="bob", addressee="alice", status=FriendshipStatus.ACCEPTED.value
        )
        friend_service.repository.get_between = AsyncMock(return_value=friendship)

        await friend_service.remove_friendship("alice", "bob")

        friend_service.repository.delete.assert_awaited_once_with(friendship)

    @pytest.mark.asyncio
    async def test_missing_relation_rejected(self, friend_service):
        with pytest.raises(FriendshipNotFoundException):
            await friend_service.remove_friendship("alice", "bob")


def test_friendship_other():
    friendship = Friendship(requester="alice", addressee="bob")

    assert friendship.other("alice") == "bob"
    assert friendship.other("bob") == "alice"
