"""Recommendations 도메인 스키마 정의

요청 스키마의 필드 이름은 추천 모델 서버의 쿼리 파라미터 이름과 같습니다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecommendationRequest(BaseModel):
    """장소 카테고리 추천 요청

    복호화된 요청 본문에서 만들어지며 그대로 모델 서버 쿼리로 전달됩니다.
    """

    user: str = Field(..., min_length=1, description="요청 사용자 이름")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    human_activity: str = Field(..., description="현재 활동 (예: still, walking)")
    seconds_in_day: int = Field(..., ge=0, le=86400, description="자정 이후 경과 초")
    week_day: int = Field(..., ge=0, le=7, description="요일")

    @field_validator("user", "human_activity", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> Any:
        """숫자 사용자 ID 등을 문자열로 변환"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ValidationRequest(RecommendationRequest):
    """클라이언트가 제안한 장소 카테고리의 유효성 확인 요청 (재학습 요청에도 사용)"""

    place_category: str = Field(..., min_length=1, description="제안된 장소 카테고리")

    def to_recommendation_request(self) -> RecommendationRequest:
        return RecommendationRequest.model_validate(
            self.model_dump(exclude={"place_category"})
        )


class RecommendedCategory(BaseModel):
    """모델 서버가 추천한 장소 카테고리"""

    place_category: str


class RecommendationAccuracy(BaseModel):
    """재학습 후 모델 정확도"""

    accuracy: float
    correct_samples: int


class ValidityResponse(BaseModel):
    """유효성 확인 응답"""

    is_valid: bool


class ValidityResult(BaseModel):
    """모델 서버의 유효성 응답 본문 (result: 1 또는 0)"""

    model_config = ConfigDict(extra="ignore")

    result: float

    @field_validator("result", mode="before")
    @classmethod
    def require_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("result must be a number")
        return value
