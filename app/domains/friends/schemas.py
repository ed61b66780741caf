"""Friends 도메인 스키마 정의"""

from datetime import datetime

from pydantic import Field

from app.core.schemas import CamelSchema


class Friend(CamelSchema):
    """친구 목록 항목"""

    friend_username: str


class FriendRequestCreate(CamelSchema):
    """친구 요청 스키마"""

    receiver: str = Field(..., min_length=1, max_length=128)


class FriendRequestConfirm(CamelSchema):
    """친구 요청 수락 스키마"""

    sender: str = Field(..., min_length=1, max_length=128)


class FriendRequestResponse(CamelSchema):
    """친구 요청 응답 스키마"""

    sender: str
    receiver: str
    status: str
    created_at: datetime
