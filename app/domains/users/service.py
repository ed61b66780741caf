"""Users 도메인 서비스"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.models import User
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)


class UserService:
    """사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def get_user(self, username: str) -> User:
        """사용자 조회

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_username(username)
        if not user:
            raise UserNotFoundException(username=username)
        return user

    async def ensure_user(self, username: str) -> None:
        """사용자 레코드가 없으면 생성

        요청에 처음 등장한 사용자를 등록합니다. 동시에 같은 사용자가
        들어와도 INSERT ... ON CONFLICT DO NOTHING으로 한 번만 생성됩니다.
        """
        created = await self.repository.create_if_absent(username)
        if created:
            logger.info(
                "User registered",
                extra={"request_id": get_request_id(), "user": username},
            )

    async def iter_usernames(self, batch_size: int = 100) -> AsyncIterator[list[str]]:
        """모든 사용자 이름을 페이지 단위로 순회

        Args:
            batch_size: 한 번에 읽을 사용자 수

        Yields:
            사용자 이름 목록 (한 페이지)
        """
        skip = 0
        while True:
            page = list(
                await self.repository.list_usernames(skip=skip, limit=batch_size)
            )
            if not page:
                return
            yield page
            if len(page) < batch_size:
                return
            skip += batch_size

    async def register_device_token(self, username: str, token: str) -> User:
        """FCM 기기 토큰 등록 (사용자가 없으면 먼저 생성)

        Args:
            username: 사용자 이름
            token: FCM 기기 토큰

        Returns:
            갱신된 사용자 객체
        """
        await self.ensure_user(username)
        user = await self.get_user(username)
        user.fcm_token = token
        user = await self.repository.update(user)

        logger.info(
            "Device token registered",
            extra={"request_id": get_request_id(), "user": username},
        )
        return user
