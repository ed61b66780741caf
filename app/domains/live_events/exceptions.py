"""Live Events 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import ForbiddenException


class LiveEventErrorCode(str, Enum):
    """라이브 이벤트 도메인 에러 코드"""

    OWNER_MISMATCH = "LIVE_EVENT_OWNER_MISMATCH"


class LiveEventOwnerMismatchException(ForbiddenException):
    """요청 본문의 owner가 토큰 사용자와 다른 경우"""

    def __init__(self, owner: str):
        super().__init__(
            message="다른 사용자의 이름으로 이벤트를 만들 수 없습니다.",
            error_code=LiveEventErrorCode.OWNER_MISMATCH,
            detail={"owner": owner},
        )
