"""Live Events 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.core.schemas import APIResponse, create_response
from app.domains.live_events.exceptions import LiveEventOwnerMismatchException
from app.domains.live_events.schemas import (
    AddLiveEvent,
    LiveEventCreated,
    LiveEventResponse,
)
from app.domains.live_events.service import LiveEventService
from app.domains.notifications.dependencies import get_notification_service
from app.domains.notifications.service import NotificationService

router = APIRouter()


def get_live_event_service(
    session: AsyncSession = Depends(get_db),
    notifier: NotificationService = Depends(get_notification_service),
) -> LiveEventService:
    """LiveEventService 의존성"""
    return LiveEventService(session, notifier)


@router.get("", response_model=APIResponse[list[LiveEventResponse]])
async def get_live_events(
    user: str = Depends(get_current_user),
    service: LiveEventService = Depends(get_live_event_service),
):
    """내 이벤트와 친구들의 진행 중인 이벤트 조회"""
    events = await service.get_live_events(user)
    return create_response(
        data=[LiveEventResponse.model_validate(e) for e in events],
        message="라이브 이벤트 목록을 조회했습니다.",
    )


@router.post("", response_model=APIResponse[LiveEventCreated], status_code=201)
async def add_live_event(
    body: AddLiveEvent,
    user: str = Depends(get_current_user),
    service: LiveEventService = Depends(get_live_event_service),
):
    """라이브 이벤트 등록"""
    if body.owner != user:
        raise LiveEventOwnerMismatchException(owner=body.owner)

    event_id = await service.add_live_event(body)
    return create_response(
        data=LiveEventCreated(id=event_id),
        message="라이브 이벤트를 등록했습니다.",
    )
