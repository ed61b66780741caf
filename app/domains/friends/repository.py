"""Friends 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.friends.models import Friendship, FriendshipStatus


class FriendshipRepository:
    """친구 관계 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _pair_condition(a: str, b: str):
        return or_(
            and_(Friendship.requester == a, Friendship.addressee == b),
            and_(Friendship.requester == b, Friendship.addressee == a),
        )

    async def get_between(self, a: str, b: str) -> Optional[Friendship]:
        """두 사용자 사이의 관계 조회 (방향 무관)"""
        result = await self.session.execute(
            select(Friendship).where(self._pair_condition(a, b)).limit(1)
        )
        return cast(Optional[Friendship], result.scalar_one_or_none())

    async def get_pending(self, requester: str, addressee: str) -> Optional[Friendship]:
        """requester → addressee 방향의 대기 중 요청 조회"""
        result = await self.session.execute(
            select(Friendship).where(
                Friendship.requester == requester,
                Friendship.addressee == addressee,
                Friendship.status == FriendshipStatus.PENDING.value,
            )
        )
        return cast(Optional[Friendship], result.scalar_one_or_none())

    async def list_friend_usernames(self, username: str) -> list[str]:
        """수락된 친구 이름 목록 (수락 순)

        Args:
            username: 기준 사용자 이름

        Returns:
            친구 이름 목록
        """
        result = await self.session.execute(
            select(Friendship)
            .where(
                Friendship.status == FriendshipStatus.ACCEPTED.value,
                or_(
                    Friendship.requester == username,
                    Friendship.addressee == username,
                ),
            )
            .order_by(Friendship.accepted_at, Friendship.id)
        )
        return [friendship.other(username) for friendship in result.scalars()]

    async def list_pending_for(self, username: str) -> Sequence[Friendship]:
        """username이 받은 대기 중 요청 목록"""
        result = await self.session.execute(
            select(Friendship)
            .where(
                Friendship.addressee == username,
                Friendship.status == FriendshipStatus.PENDING.value,
            )
            .order_by(Friendship.created_at, Friendship.id)
        )
        return cast(Sequence[Friendship], result.scalars().all())

    async def create(self, friendship: Friendship) -> Friendship:
        self.session.add(friendship)
        await self.session.flush()
        await self.session.refresh(friendship)
        return friendship

    async def update(self, friendship: Friendship) -> Friendship:
        await self.session.flush()
        await self.session.refresh(friendship)
        return friendship

    async def delete(self, friendship: Friendship) -> None:
        await self.session.delete(friendship)
        await self.session.flush()
