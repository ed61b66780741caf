"""Live Events 도메인 모듈

친구들과 공유되는 시간 제한 이벤트를 관리합니다.
"""

from app.domains.live_events.exceptions import (
    LiveEventErrorCode,
    LiveEventOwnerMismatchException,
)
from app.domains.live_events.models import LiveEvent
from app.domains.live_events.repository import LiveEventRepository
from app.domains.live_events.router import router
from app.domains.live_events.schemas import (
    AddLiveEvent,
    LiveEventCreated,
    LiveEventResponse,
)
from app.domains.live_events.service import LiveEventService

__all__ = [
    "LiveEvent",
    "LiveEventRepository",
    "LiveEventService",
    "AddLiveEvent",
    "LiveEventCreated",
    "LiveEventResponse",
    "router",
    "LiveEventErrorCode",
    "LiveEventOwnerMismatchException",
]
