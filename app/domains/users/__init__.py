"""Users 도메인 모듈

사용자 등록과 FCM 기기 토큰 관리를 담당합니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (DeviceTokenRegister, UserResponse)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (사용자 보장, 페이지 순회, 토큰 등록)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import UserErrorCode, UserNotFoundException
from app.domains.users.models import User
from app.domains.users.router import router
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import DeviceTokenRegister, UserResponse
from app.domains.users.service import UserService

__all__ = [
    "User",
    "UserRepository",
    "UserService",
    "DeviceTokenRegister",
    "UserResponse",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
]
