"""Notifications 도메인 서비스

사용자 이름으로 FCM 기기 토큰을 찾아 푸시를 보냅니다.
발송은 최선 노력(best-effort)이며 실패해도 예외를 올리지 않고 False를 돌려줍니다.
"""

from typing import TYPE_CHECKING, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.push import PushClient, PushDeliveryException
from app.domains.notifications.schemas import NotificationKind, PushMessage
from app.domains.users.repository import UserRepository

if TYPE_CHECKING:
    from app.domains.live_events.models import LiveEvent
    from app.domains.places.models import PointOfInterest

logger = get_logger(__name__)


class NotificationService:
    """푸시 알림 게이트웨이"""

    def __init__(self, session: AsyncSession, push_client: PushClient):
        self.user_repository = UserRepository(session)
        self.push_client = push_client

    async def send(self, username: str, message: PushMessage) -> bool:
        """사용자 한 명에게 푸시 발송

        Args:
            username: 받는 사용자 이름
            message: 푸시 메시지

        Returns:
            발송 성공 여부 (기기 토큰이 없거나 FCM 실패 시 False)
        """
        token = await self.user_repository.get_fcm_token(username)
        if not token:
            logger.warning(
                "No device token for user",
                extra={
                    "request_id": get_request_id(),
                    "user": username,
                    "kind": message.data.get("kind"),
                },
            )
            return False

        return await self._deliver(username, token, message)

    async def _deliver(self, username: str, token: str, message: PushMessage) -> bool:
        try:
            await self.push_client.send(
                token=token,
                title=message.title,
                body=message.body,
                data=message.data,
            )
        except PushDeliveryException as e:
            logger.warning(
                "Notification not delivered",
                extra={
                    "request_id": get_request_id(),
                    "user": username,
                    "kind": message.data.get("kind"),
                    "error": e.original_error,
                },
            )
            return False

        logger.info(
            "Notification delivered",
            extra={
                "request_id": get_request_id(),
                "user": username,
                "kind": message.data.get("kind"),
            },
        )
        return True

    async def notify_place_suggestion(
        self,
        poi: "PointOfInterest",
        user: str,
        title: str,
        kind: NotificationKind,
    ) -> bool:
        """추천 장소 알림

        Args:
            poi: 추천할 장소
            user: 받는 사용자 이름
            title: 알림 제목
            kind: 알림 종류 (place-recommendation / validity-recommendation)
        """
        body = f"{poi.name} - {poi.address}" if poi.address else poi.name
        message = PushMessage(
            title=title,
            body=body,
            data={
                "kind": kind.value,
                "markId": poi.mark_id,
                "owner": poi.owner,
                "type": poi.type,
                "latitude": str(poi.latitude),
                "longitude": str(poi.longitude),
            },
        )
        return await self.send(user, message)

    async def notify_retrained_model(
        self, accuracy: float, correct_samples: int, user: str
    ) -> bool:
        """모델 재학습 완료 알림"""
        message = PushMessage(
            title="Your recommendation model has been retrained",
            body=f"New accuracy: {accuracy:.1%}",
            data={
                "kind": NotificationKind.MODEL_RETRAINED.value,
                "accuracy": str(accuracy),
                "correctSamples": str(correct_samples),
            },
        )
        return await self.send(user, message)

    async def notify_live_event(
        self, event: "LiveEvent", recipients: Iterable[str]
    ) -> int:
        """라이브 이벤트를 친구들에게 알림

        Returns:
            발송에 성공한 수신자 수
        """
        message = PushMessage(
            title=f"{event.owner} started a live event",
            body=f"{event.name} - {event.address}",
            data={
                "kind": NotificationKind.LIVE_EVENT.value,
                "liveEventId": str(event.id),
                "owner": event.owner,
                "expirationDate": str(event.expiration_date),
            },
        )
        recipients = list(recipients)
        tokens = await self.user_repository.get_fcm_tokens(recipients)

        delivered = 0
        for username in recipients:
            token = tokens.get(username)
            if token is None:
                continue
            if await self._deliver(username, token, message):
                delivered += 1

        logger.info(
            "Live event fan-out finished",
            extra={
                "request_id": get_request_id(),
                "live_event_id": event.id,
                "recipients": len(recipients),
                "delivered": delivered,
            },
        )
        return delivered

    async def notify_friendship_request(self, sender: str, receiver: str) -> bool:
        """친구 요청 알림 (받는 사람에게)"""
        message = PushMessage(
            title="New friendship request",
            body=f"{sender} wants to be your friend",
            data={
                "kind": NotificationKind.FRIENDSHIP_REQUEST.value,
                "sender": sender,
            },
        )
        return await self.send(receiver, message)

    async def notify_friendship_confirmation(self, receiver: str, sender: str) -> bool:
        """친구 요청 수락 알림 (요청을 보낸 사람에게)"""
        message = PushMessage(
            title="Friendship confirmed",
            body=f"{receiver} accepted your friendship request",
            data={
                "kind": NotificationKind.FRIENDSHIP_CONFIRMATION.value,
                "friend": receiver,
            },
        )
        return await self.send(sender, message)
