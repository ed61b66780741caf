"""Live Events 도메인 스키마 정의"""

from pydantic import Field

from app.core.schemas import CamelSchema


class AddLiveEvent(CamelSchema):
    """라이브 이벤트 생성 요청 스키마"""

    expire_after: int = Field(
        ..., gt=0, le=60 * 24 * 7, description="만료까지 남은 시간 (분)"
    )
    owner: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=512)


class LiveEventResponse(CamelSchema):
    """라이브 이벤트 응답 스키마"""

    id: int
    owner: str
    name: str
    address: str
    expiration_date: int


class LiveEventCreated(CamelSchema):
    """라이브 이벤트 생성 결과"""

    id: int
