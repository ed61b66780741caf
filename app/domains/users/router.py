"""Users 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.core.schemas import APIResponse, create_response
from app.domains.users.schemas import DeviceTokenRegister, UserResponse
from app.domains.users.service import UserService

router = APIRouter()


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(session)


@router.put("/me/device-token", response_model=APIResponse[UserResponse])
async def register_device_token(
    body: DeviceTokenRegister,
    username: str = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """현재 사용자의 FCM 기기 토큰 등록"""
    user = await service.register_device_token(username, body.token)
    return create_response(
        data=UserResponse.model_validate(user),
        message="기기 토큰이 등록되었습니다.",
    )
