"""Places 도메인 스키마 정의

클라이언트와 주고받는 필드는 camelCase(markId, phoneNumber)입니다.
"""

from pydantic import Field

from app.core.schemas import CamelSchema


class PoiCreate(CamelSchema):
    """장소 등록 요청 스키마"""

    address: str = Field(default="", max_length=512)
    type: str = Field(..., min_length=1, max_length=128, description="장소 카테고리")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(default="", max_length=64)
    visibility: str = Field(default="public", max_length=32)
    url: str = Field(default="", max_length=1024)


class PoiResponse(CamelSchema):
    """장소 응답 스키마"""

    mark_id: str
    address: str
    type: str
    latitude: float
    longitude: float
    name: str
    phone_number: str
    visibility: str
    url: str
