"""Users 도메인 리포지토리"""

from typing import Iterable, Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[User]:
        """사용자 이름으로 조회

        Args:
            username: 사용자 이름

        Returns:
            사용자 객체 또는 None
        """
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def exists(self, username: str) -> bool:
        result = await self.session.execute(
            select(User.username).where(User.username == username)
        )
        return result.scalar_one_or_none() is not None

    async def create_if_absent(self, username: str) -> bool:
        """사용자가 없으면 생성

        Returns:
            새로 생성했으면 True, 이미 있었으면 False
        """
        stmt = (
            insert(User)
            .values(username=username)
            .on_conflict_do_nothing(index_elements=[User.username])
            .returning(User.username)
        )
        result = await self.session.execute(stmt)
        created = result.scalar_one_or_none() is not None
        await self.session.flush()
        return created

    async def list_usernames(self, skip: int = 0, limit: int = 100) -> Sequence[str]:
        """사용자 이름 목록 조회 (이름 순 정렬, 페이지 단위)

        Args:
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수

        Returns:
            사용자 이름 목록
        """
        result = await self.session.execute(
            select(User.username)
            .order_by(User.username)
            .offset(skip)
            .limit(limit)
        )
        return cast(Sequence[str], result.scalars().all())

    async def get_fcm_token(self, username: str) -> Optional[str]:
        result = await self.session.execute(
            select(User.fcm_token).where(User.username == username)
        )
        return cast(Optional[str], result.scalar_one_or_none())

    async def get_fcm_tokens(self, usernames: Iterable[str]) -> dict[str, str]:
        """여러 사용자의 FCM 토큰 조회 (토큰이 없는 사용자는 제외)"""
        names = list(usernames)
        if not names:
            return {}
        result = await self.session.execute(
            select(User.username, User.fcm_token).where(
                User.username.in_(names), User.fcm_token.is_not(None)
            )
        )
        return {row.username: row.fcm_token for row in result}

    async def update(self, user: User) -> User:
        """사용자 수정

        Args:
            user: 수정할 사용자 객체

        Returns:
            수정된 사용자 객체
        """
        await self.session.flush()
        await self.session.refresh(user)
        return user
