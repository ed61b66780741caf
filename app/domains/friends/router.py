"""Friends 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.core.schemas import APIResponse, create_response
from app.domains.friends.schemas import (
    Friend,
    FriendRequestConfirm,
    FriendRequestCreate,
    FriendRequestResponse,
)
from app.domains.friends.service import FriendService
from app.domains.notifications.dependencies import get_notification_service
from app.domains.notifications.service import NotificationService

router = APIRouter()


def get_friend_service(
    session: AsyncSession = Depends(get_db),
    notifier: NotificationService = Depends(get_notification_service),
) -> FriendService:
    """FriendService 의존성"""
    return FriendService(session, notifier)


def _to_response(friendship) -> FriendRequestResponse:
    return FriendRequestResponse(
        sender=friendship.requester,
        receiver=friendship.addressee,
        status=friendship.status,
        created_at=friendship.created_at,
    )


@router.get("", response_model=APIResponse[list[Friend]])
async def get_friends(
    user: str = Depends(get_current_user),
    service: FriendService = Depends(get_friend_service),
):
    """친구 목록 조회"""
    friends = await service.get_friends(user)
    return create_response(data=friends, message="친구 목록을 조회했습니다.")


@router.get("/requests", response_model=APIResponse[list[FriendRequestResponse]])
async def get_pending_requests(
    user: str = Depends(get_current_user),
    service: FriendService = Depends(get_friend_service),
):
    """받은 친구 요청 목록 조회"""
    requests = await service.get_pending_requests(user)
    return create_response(
        data=[_to_response(r) for r in requests],
        message="친구 요청 목록을 조회했습니다.",
    )


@router.post(
    "/requests",
    response_model=APIResponse[FriendRequestResponse],
    status_code=201,
)
async def send_friendship_request(
    body: FriendRequestCreate,
    user: str = Depends(get_current_user),
    service: FriendService = Depends(get_friend_service),
):
    """친구 요청 보내기"""
    friendship = await service.send_friendship_request(user, body.receiver)
    return create_response(
        data=_to_response(friendship), message="친구 요청을 보냈습니다."
    )


@router.post(
    "/requests/confirm",
    response_model=APIResponse[FriendRequestResponse],
)
async def confirm_friendship(
    body: FriendRequestConfirm,
    user: str = Depends(get_current_user),
    service: FriendService = Depends(get_friend_service),
):
    """받은 친구 요청 수락"""
    friendship = await service.confirm_friendship(user, body.sender)
    return create_response(
        data=_to_response(friendship), message="친구 요청을 수락했습니다."
    )


@router.delete("/{friend_username}", status_code=204)
async def remove_friendship(
    friend_username: str,
    user: str = Depends(get_current_user),
    service: FriendService = Depends(get_friend_service),
):
    """친구 삭제 (대기 중 요청 취소 포함)"""
    await service.remove_friendship(user, friend_username)
    return None
