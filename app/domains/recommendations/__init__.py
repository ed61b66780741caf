"""Recommendations 도메인 모듈

구조:
    - models.py: 장소 알림 이력 (RecommendedPoi)
    - schemas.py: 추천/유효성/재학습 요청과 응답
    - selector.py: 가장 가까운 관심 장소 선택
    - client.py: 추천 모델 서버(Context Aware API) 클라이언트
    - repository.py: 알림 이력 데이터 접근 계층
    - service.py: 추천 흐름, 알림 중복 방지, 만료 이력 정리
    - router.py: 암호화된 요청을 받는 API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.recommendations.client import ContextAwareClient
from app.domains.recommendations.exceptions import (
    ContextAwareAPIException,
    RecommendationErrorCode,
    RecommendationUnavailableException,
    ValidityUnavailableException,
)
from app.domains.recommendations.models import RecommendedPoi
from app.domains.recommendations.repository import RecommendedPoiRepository
from app.domains.recommendations.router import router
from app.domains.recommendations.schemas import (
    RecommendationAccuracy,
    RecommendationRequest,
    RecommendedCategory,
    ValidationRequest,
    ValidityResponse,
)
from app.domains.recommendations.selector import select_nearest_poi
from app.domains.recommendations.service import RecommendationService

__all__ = [
    "ContextAwareClient",
    "RecommendedPoi",
    "RecommendedPoiRepository",
    "RecommendationService",
    "RecommendationRequest",
    "ValidationRequest",
    "RecommendedCategory",
    "RecommendationAccuracy",
    "ValidityResponse",
    "select_nearest_poi",
    "router",
    "RecommendationErrorCode",
    "ContextAwareAPIException",
    "RecommendationUnavailableException",
    "ValidityUnavailableException",
]
