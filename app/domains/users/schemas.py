"""Users 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceTokenRegister(BaseModel):
    """FCM 기기 토큰 등록 요청 스키마"""

    token: str = Field(..., min_length=1, max_length=512, description="FCM 기기 토큰")


class UserResponse(BaseModel):
    """사용자 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    username: str
    created_at: datetime
    updated_at: Optional[datetime] = None
