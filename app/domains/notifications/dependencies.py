"""Notifications 도메인 의존성"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.push import PushClient, get_push_client
from app.domains.notifications.service import NotificationService


def get_notification_service(
    session: AsyncSession = Depends(get_db),
    push_client: PushClient = Depends(get_push_client),
) -> NotificationService:
    """NotificationService 의존성 (요청 세션 공유)"""
    return NotificationService(session, push_client)
