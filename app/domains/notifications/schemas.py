"""Notifications 도메인 스키마 정의"""

from enum import Enum

from pydantic import BaseModel, Field


class NotificationKind(str, Enum):
    """푸시 데이터 페이로드의 kind 값 (클라이언트가 화면 분기에 사용)"""

    PLACE_RECOMMENDATION = "place-recommendation"
    VALIDITY_RECOMMENDATION = "validity-recommendation"
    MODEL_RETRAINED = "model-retrained"
    LIVE_EVENT = "live-event"
    FRIENDSHIP_REQUEST = "friendship-request"
    FRIENDSHIP_CONFIRMATION = "friendship-confirmation"


class PushMessage(BaseModel):
    """발송할 푸시 메시지

    FCM data 페이로드는 문자열 값만 허용하므로 data는 str → str 입니다.
    """

    title: str
    body: str
    data: dict[str, str] = Field(default_factory=dict)
