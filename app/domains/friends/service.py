"""Friends 도메인 서비스"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.utils.datetime import now_utc
from app.domains.friends.exceptions import (
    FriendRequestNotFoundException,
    FriendshipAlreadyExistsException,
    FriendshipNotFoundException,
    SelfFriendshipException,
)
from app.domains.friends.models import Friendship, FriendshipStatus
from app.domains.friends.repository import FriendshipRepository
from app.domains.friends.schemas import Friend
from app.domains.notifications.service import NotificationService
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)


class FriendService:
    """친구 관계 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        notifier: Optional[NotificationService] = None,
    ):
        self.repository = FriendshipRepository(session)
        self.user_repository = UserRepository(session)
        self.notifier = notifier

    async def get_friends(self, username: str) -> list[Friend]:
        """친구 목록 조회"""
        names = await self.repository.list_friend_usernames(username)
        return [Friend(friend_username=name) for name in names]

    async def get_pending_requests(self, username: str) -> list[Friendship]:
        """받은 친구 요청 목록 조회"""
        return list(await self.repository.list_pending_for(username))

    async def send_friendship_request(self, sender: str, receiver: str) -> Friendship:
        """친구 요청 보내기

        Args:
            sender: 요청하는 사용자
            receiver: 요청 받을 사용자

        Returns:
            생성된 대기 중 요청

        Raises:
            SelfFriendshipException: sender와 receiver가 같은 경우
            UserNotFoundException: receiver가 없는 경우
            FriendshipAlreadyExistsException: 이미 요청 중이거나 친구인 경우
        """
        if sender == receiver:
            raise SelfFriendshipException(username=sender)
        if not await self.user_repository.exists(receiver):
            raise UserNotFoundException(username=receiver)

        existing = await self.repository.get_between(sender, receiver)
        if existing is not None:
            raise FriendshipAlreadyExistsException(
                sender=sender, receiver=receiver, status=existing.status
            )

        await self.user_repository.create_if_absent(sender)
        friendship = await self.repository.create(
            Friendship(
                requester=sender,
                addressee=receiver,
                status=FriendshipStatus.PENDING.value,
            )
        )
        logger.info(
            "Friendship requested",
            extra={"request_id": get_request_id(), "user": sender, "receiver": receiver},
        )

        if self.notifier is not None:
            await self.notifier.notify_friendship_request(sender, receiver)
        return friendship

    async def confirm_friendship(self, receiver: str, sender: str) -> Friendship:
        """받은 친구 요청 수락

        Args:
            receiver: 요청을 받은(수락하는) 사용자
            sender: 요청을 보낸 사용자

        Raises:
            FriendRequestNotFoundException: 대기 중인 요청이 없는 경우
        """
        friendship = await self.repository.get_pending(sender, receiver)
        if friendship is None:
            raise FriendRequestNotFoundException(sender=sender, receiver=receiver)

        friendship.status = FriendshipStatus.ACCEPTED.value
        friendship.accepted_at = now_utc()
        friendship = await self.repository.update(friendship)

        logger.info(
            "Friendship confirmed",
            extra={"request_id": get_request_id(), "user": receiver, "sender": sender},
        )

        if self.notifier is not None:
            await self.notifier.notify_friendship_confirmation(receiver, sender)
        return friendship

    async def remove_friendship(self, username: str, friend: str) -> None:
        """친구 관계 삭제 (방향, 상태 무관)

        Raises:
            FriendshipNotFoundException: 관계가 없는 경우
        """
        friendship = await self.repository.get_between(username, friend)
        if friendship is None:
            raise FriendshipNotFoundException(username=username, friend=friend)

        await self.repository.delete(friendship)
        logger.info(
            "Friendship removed",
            extra={"request_id": get_request_id(), "user": username, "friend": friend},
        )
