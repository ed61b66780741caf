"""Notifications 도메인 모듈

FCM 푸시 발송을 감싸는 게이트웨이입니다. HTTP 엔드포인트는 없습니다.
"""

from app.domains.notifications.schemas import NotificationKind, PushMessage
from app.domains.notifications.service import NotificationService

__all__ = [
    "NotificationKind",
    "NotificationService",
    "PushMessage",
]
