"""Places 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException


class PlaceErrorCode(str, Enum):
    """장소 도메인 에러 코드"""

    POI_NOT_FOUND = "POI_NOT_FOUND"


class PoiNotFoundException(NotFoundException):
    """장소가 없거나 요청 사용자의 소유가 아닌 경우"""

    def __init__(self, mark_id: str):
        super().__init__(
            message="장소를 찾을 수 없습니다.",
            error_code=PlaceErrorCode.POI_NOT_FOUND,
            detail={"mark_id": mark_id},
        )
