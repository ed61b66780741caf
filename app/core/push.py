"""FCM 푸시 발송 클라이언트

Firebase Cloud Messaging을 직접 호출하는 유일한 곳입니다.
"""

import asyncio
from functools import lru_cache
from typing import Optional

from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging

from app.core.exceptions import ErrorCode, ExternalServiceException
from app.core.firebase import get_firebase_app
from app.core.logging import get_logger

logger = get_logger(__name__)


class PushDeliveryException(ExternalServiceException):
    """푸시 발송 실패"""

    def __init__(self, original_error: str):
        super().__init__(
            service="fcm",
            original_error=original_error,
            message="푸시 알림 발송에 실패했습니다.",
            error_code=ErrorCode.PUSH_DELIVERY_FAILED,
        )


class PushClient:
    """FCM 클라이언트

    기기 토큰 하나에 알림 메시지를 보냅니다.
    """

    def __init__(self, app=None):
        """
        Args:
            app: Firebase 앱 (생략 시 첫 발송 때 기본 앱을 초기화)
        """
        self.app = app

    async def send(
        self,
        token: str,
        title: str,
        body: str,
        data: Optional[dict[str, str]] = None,
    ) -> str:
        """단일 기기로 알림 발송

        Args:
            token: FCM 기기 토큰
            title: 알림 제목
            body: 알림 본문
            data: 추가 데이터 페이로드 (값은 모두 문자열)

        Returns:
            FCM 메시지 ID

        Raises:
            PushDeliveryException: FCM 호출 실패 시
        """
        message = messaging.Message(
            notification=messaging.Notification(title=title, body=body),
            data=data or {},
            token=token,
        )

        try:
            # firebase-admin은 동기 API이므로 스레드에서 실행
            message_id: str = await asyncio.to_thread(
                messaging.send, message, False, self.app or get_firebase_app()
            )
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            logger.error(
                "FCM send failed",
                extra={"error": str(e), "title": title},
            )
            raise PushDeliveryException(original_error=str(e))

        logger.debug(
            "FCM message sent",
            extra={"message_id": message_id, "title": title},
        )
        return message_id


@lru_cache
def _create_push_client() -> PushClient:
    """푸시 클라이언트 싱글톤 생성 (캐시됨)"""
    return PushClient()


def get_push_client() -> PushClient:
    """FastAPI DI용 푸시 클라이언트 의존성"""
    return _create_push_client()
