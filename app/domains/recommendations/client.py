"""Context Aware API 클라이언트

추천 모델 서버의 /recommendation/{places,validity,train} 엔드포인트를 호출합니다.
"""

from functools import lru_cache
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.domains.recommendations.exceptions import ContextAwareAPIException
from app.domains.recommendations.schemas import (
    RecommendationAccuracy,
    RecommendationRequest,
    RecommendedCategory,
    ValidationRequest,
    ValidityResult,
)

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ContextAwareClient:
    """추천 모델 서버 클라이언트

    호출마다 AsyncClient를 열고 닫습니다. 재시도는 하지 않습니다.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: 애플리케이션 설정 (기본 URL, 타임아웃)
            transport: 테스트용 httpx 전송 계층
        """
        self.base_url = settings.recommendation_api_url
        self.timeout = settings.context_api_timeout
        self._transport = transport

    async def get_place_category(
        self, request: RecommendationRequest
    ) -> RecommendedCategory:
        """현재 컨텍스트에 맞는 장소 카테고리 조회

        Raises:
            ContextAwareAPIException: 호출 실패 또는 잘못된 응답 본문
        """
        return await self._request(
            "GET", "places", RecommendedCategory, params=request.model_dump()
        )

    async def get_validity(self, request: ValidationRequest) -> bool:
        """제안된 장소 카테고리가 현재 컨텍스트에 유효한지 확인

        Returns:
            모델 결과가 1이면 True, 그 외에는 False

        Raises:
            ContextAwareAPIException: 호출 실패 또는 잘못된 응답 본문
        """
        result = await self._request(
            "GET", "validity", ValidityResult, params=request.model_dump()
        )
        return result.result == 1

    async def train(self, request: ValidationRequest) -> RecommendationAccuracy:
        """새 샘플로 모델 재학습

        Raises:
            ContextAwareAPIException: 호출 실패 또는 잘못된 응답 본문
        """
        return await self._request(
            "POST", "train", RecommendationAccuracy, json=request.model_dump()
        )

    async def _request(
        self,
        method: str,
        endpoint: str,
        response_model: type[ResponseT],
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> ResponseT:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, endpoint, params=params, json=json
                )
                response.raise_for_status()
                return response_model.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(
                "Context API returned error status",
                extra={"endpoint": endpoint, "status": e.response.status_code},
            )
            raise ContextAwareAPIException(
                endpoint=endpoint,
                original_error=f"HTTP {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            logger.error(
                "Context API request failed",
                extra={"endpoint": endpoint, "error": repr(e)},
            )
            raise ContextAwareAPIException(endpoint=endpoint, original_error=repr(e))
        except (ValueError, ValidationError) as e:
            # response.json() 디코딩 실패(ValueError) 포함
            logger.error(
                "Context API returned malformed payload",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise ContextAwareAPIException(
                endpoint=endpoint, original_error="malformed payload"
            )


@lru_cache
def _create_context_client() -> ContextAwareClient:
    """Context Aware 클라이언트 싱글톤 생성 (캐시됨)"""
    return ContextAwareClient(get_settings())


def get_context_client() -> ContextAwareClient:
    """FastAPI DI용 Context Aware 클라이언트 의존성"""
    return _create_context_client()
