"""Recommendations 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, ExternalServiceException


class RecommendationErrorCode(str, Enum):
    """추천 도메인 에러 코드"""

    CONTEXT_API_ERROR = "CONTEXT_API_ERROR"
    RECOMMENDATION_UNAVAILABLE = "RECOMMENDATION_UNAVAILABLE"
    VALIDITY_UNAVAILABLE = "VALIDITY_UNAVAILABLE"


class ContextAwareAPIException(ExternalServiceException):
    """Context Aware API 호출 실패 (연결 오류, 2xx 외 응답, 잘못된 응답 본문)"""

    def __init__(self, endpoint: str, original_error: str):
        self.endpoint = endpoint
        super().__init__(
            service="context-aware-api",
            original_error=original_error,
            message="추천 모델 서버 호출에 실패했습니다.",
            error_code=RecommendationErrorCode.CONTEXT_API_ERROR,
        )


class RecommendationUnavailableException(BadRequestException):
    """추천 카테고리를 얻지 못한 경우"""

    def __init__(self, user: str):
        super().__init__(
            message="추천 카테고리를 가져올 수 없습니다.",
            error_code=RecommendationErrorCode.RECOMMENDATION_UNAVAILABLE,
            detail={"user": user},
        )


class ValidityUnavailableException(BadRequestException):
    """장소 카테고리 유효성 판단을 얻지 못한 경우"""

    def __init__(self, user: str, place_category: str):
        super().__init__(
            message="장소 카테고리 유효성을 확인할 수 없습니다.",
            error_code=RecommendationErrorCode.VALIDITY_UNAVAILABLE,
            detail={"user": user, "place_category": place_category},
        )
