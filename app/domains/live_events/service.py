"""Live Events 도메인 서비스"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.schemas import SweepReport
from app.core.utils.datetime import now_epoch_seconds
from app.core.utils.time import measure_time
from app.domains.friends.repository import FriendshipRepository
from app.domains.live_events.models import LiveEvent
from app.domains.live_events.repository import LiveEventRepository
from app.domains.live_events.schemas import AddLiveEvent
from app.domains.notifications.service import NotificationService
from app.domains.users.service import UserService

logger = get_logger(__name__)


class LiveEventService:
    """라이브 이벤트 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        notifier: Optional[NotificationService] = None,
    ):
        self.session = session
        self.repository = LiveEventRepository(session)
        self.friend_repository = FriendshipRepository(session)
        self.user_service = UserService(session)
        self.notifier = notifier

    async def get_live_events(self, user: str) -> list[LiveEvent]:
        """내 이벤트와 친구들의 이벤트 중 만료되지 않은 것

        Args:
            user: 사용자 이름

        Returns:
            내 이벤트 다음에 친구 목록 순서대로 친구들의 이벤트
        """
        friends = await self.friend_repository.list_friend_usernames(user)
        return await self.repository.list_active_by_owners(
            [user, *friends], now_epoch_seconds()
        )

    async def add_live_event(self, data: AddLiveEvent) -> int:
        """라이브 이벤트 등록 후 친구들에게 알림

        Args:
            data: 생성 요청 (expire_after는 분 단위)

        Returns:
            생성된 이벤트 ID
        """
        await self.user_service.ensure_user(data.owner)
        event = await self.repository.create(
            LiveEvent(
                owner=data.owner,
                name=data.name,
                address=data.address,
                expiration_date=now_epoch_seconds() + data.expire_after * 60,
            )
        )
        logger.info(
            "Live event added",
            extra={
                "request_id": get_request_id(),
                "user": data.owner,
                "live_event_id": event.id,
                "expiration_date": event.expiration_date,
            },
        )

        if self.notifier is not None:
            friends = await self.friend_repository.list_friend_usernames(data.owner)
            if friends:
                await self.notifier.notify_live_event(event, friends)
        return event.id

    async def clear_expired_live_events(self, batch_size: int = 100) -> SweepReport:
        """모든 사용자의 만료된 이벤트 삭제

        사용자별로 자신이 연 이벤트만 삭제합니다. 친구의 이벤트는 그 친구의
        차례에 정리됩니다. 레코드마다 savepoint를 사용하므로 한 건이 실패해도
        나머지는 계속 진행합니다.

        Args:
            batch_size: 한 번에 읽을 사용자 수

        Returns:
            정리 결과
        """
        report = SweepReport(name="live_events")
        now = now_epoch_seconds()

        with measure_time() as timer:
            async for usernames in self.user_service.iter_usernames(batch_size):
                for username in usernames:
                    report.users_scanned += 1
                    for event in await self.repository.list_expired_by_owner(
                        username, now
                    ):
                        event_id = event.id
                        try:
                            async with self.session.begin_nested():
                                await self.repository.delete(event)
                        except SQLAlchemyError as e:
                            report.failures.append(f"{username}/{event_id}: {e}")
                            logger.error(
                                "Failed to remove expired live event",
                                extra={
                                    "user": username,
                                    "live_event_id": event_id,
                                    "error": str(e),
                                },
                            )
                            continue
                        report.removed += 1

        logger.info(
            "Expired live events swept",
            extra={
                "users_scanned": report.users_scanned,
                "removed": report.removed,
                "failures": len(report.failures),
                "elapsed_ms": round(timer["elapsed_ms"], 2),
            },
        )
        return report
