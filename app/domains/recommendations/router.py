"""Recommendations 도메인 라우터

요청 본문은 서버 공개키로 암호화된 base64 문자열입니다.
"""

from typing import Any, TypeVar

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import ensure_same_user, get_current_user, get_decrypted_body
from app.core.schemas import APIResponse, create_response
from app.core.security import InvalidEncryptedBodyException
from app.domains.notifications.dependencies import get_notification_service
from app.domains.notifications.service import NotificationService
from app.domains.recommendations.client import ContextAwareClient, get_context_client
from app.domains.recommendations.exceptions import (
    RecommendationUnavailableException,
    ValidityUnavailableException,
)
from app.domains.recommendations.schemas import (
    RecommendationAccuracy,
    RecommendationRequest,
    RecommendedCategory,
    ValidationRequest,
    ValidityResponse,
)
from app.domains.recommendations.service import RecommendationService

router = APIRouter()

RequestT = TypeVar("RequestT", bound=BaseModel)

_ENCRYPTED_BODY = {
    "requestBody": {
        "required": True,
        "content": {"text/plain": {"schema": {"type": "string", "format": "byte"}}},
    }
}


def get_recommendation_service(
    session: AsyncSession = Depends(get_db),
    client: ContextAwareClient = Depends(get_context_client),
    notifier: NotificationService = Depends(get_notification_service),
) -> RecommendationService:
    """RecommendationService 의존성"""
    return RecommendationService(session, client, notifier)


def _parse_body(model: type[RequestT], body: dict[str, Any], user: str) -> RequestT:
    """복호화된 본문 검증 후 토큰 사용자와 비교"""
    try:
        request = model.model_validate(body)
    except ValidationError as e:
        fields = sorted(
            {".".join(str(p) for p in err["loc"]) or "body" for err in e.errors()}
        )
        raise InvalidEncryptedBodyException(
            reason=f"invalid fields: {', '.join(fields)}"
        )
    ensure_same_user(user, getattr(request, "user"))
    return request


@router.post(
    "/places",
    response_model=APIResponse[RecommendedCategory],
    openapi_extra=_ENCRYPTED_BODY,
)
async def recommend_places(
    user: str = Depends(get_current_user),
    body: dict[str, Any] = Depends(get_decrypted_body),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """현재 컨텍스트에 맞는 장소 카테고리 추천"""
    request = _parse_body(RecommendationRequest, body, user)
    category = await service.recommend_place_of_category(request)
    if category is None:
        raise RecommendationUnavailableException(user=user)
    return create_response(data=category, message="장소 카테고리를 추천했습니다.")


@router.post(
    "/validity",
    response_model=APIResponse[ValidityResponse],
    openapi_extra=_ENCRYPTED_BODY,
)
async def check_validity(
    user: str = Depends(get_current_user),
    body: dict[str, Any] = Depends(get_decrypted_body),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """제안된 장소 카테고리 유효성 확인"""
    request = _parse_body(ValidationRequest, body, user)
    is_valid = await service.should_advise_place_category(request)
    if is_valid is None:
        raise ValidityUnavailableException(
            user=user, place_category=request.place_category
        )
    return create_response(
        data=ValidityResponse(is_valid=is_valid),
        message="장소 카테고리 유효성을 확인했습니다.",
    )


@router.post(
    "/train",
    response_model=APIResponse[RecommendationAccuracy],
    openapi_extra=_ENCRYPTED_BODY,
)
async def train_model(
    user: str = Depends(get_current_user),
    body: dict[str, Any] = Depends(get_decrypted_body),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """새 샘플로 모델 재학습 (실패해도 200, data는 null)"""
    request = _parse_body(ValidationRequest, body, user)
    accuracy = await service.train_again_model(request)
    if accuracy is None:
        return create_response(data=None, message="모델 재학습에 실패했습니다.")
    return create_response(data=accuracy, message="모델을 재학습했습니다.")
