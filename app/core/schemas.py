"""공통 API 응답 스키마

이 모듈은 API 응답의 일관된 구조를 정의합니다.

Usage::

    from app.core.schemas import APIResponse, create_response
    return create_response(data=poi, message="장소를 등록했습니다.")

Note:
    Generic 타입의 classmethod는 Pydantic에서 제한이 있으므로,
    팩토리 함수(create_response)를 사용하거나 직접 생성자를 호출하세요.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelSchema(BaseModel):
    """camelCase 필드 이름으로 직렬화되는 스키마 (ORM 모델 변환용)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @router.get("", response_model=APIResponse[list[PoiResponse]])
        async def list_pois(user: str = Depends(get_current_user)):
            pois = await service.list_pois(user)
            return create_response(
                data=[PoiResponse.model_validate(p) for p in pois],
                message="장소 목록을 조회했습니다.",
            )
    """

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    data: Optional[DataT] = None


def create_response(
    data: Optional[DataT] = None,
    message: str = "요청이 성공적으로 처리되었습니다.",
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        success: 성공 여부

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=success, message=message, data=data)


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "추천 카테고리를 가져올 수 없습니다.",
            "error": {
                "code": "RECOMMENDATION_UNAVAILABLE",
                "message": "추천 카테고리를 가져올 수 없습니다.",
                "detail": {"user": "alice"}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail


class SweepReport(BaseModel):
    """만료 데이터 정리 작업 결과

    한 건의 삭제 실패가 전체 작업을 멈추지 않으며, 실패는 failures에 모입니다.
    """

    name: str = Field(..., description="정리 작업 이름")
    users_scanned: int = Field(default=0, description="확인한 사용자 수")
    removed: int = Field(default=0, description="삭제한 레코드 수")
    failures: list[str] = Field(default_factory=list, description="실패 내역")

    @property
    def succeeded(self) -> bool:
        return not self.failures
