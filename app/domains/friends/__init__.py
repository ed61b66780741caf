"""Friends 도메인 모듈

친구 요청/수락/삭제를 관리합니다. 친구 목록은 추천의 소셜 범위와
라이브 이벤트 공유 범위를 결정합니다.
"""

from app.domains.friends.exceptions import (
    FriendErrorCode,
    FriendRequestNotFoundException,
    FriendshipAlreadyExistsException,
    FriendshipNotFoundException,
    SelfFriendshipException,
)
from app.domains.friends.models import Friendship, FriendshipStatus
from app.domains.friends.repository import FriendshipRepository
from app.domains.friends.router import router
from app.domains.friends.schemas import Friend
from app.domains.friends.service import FriendService

__all__ = [
    "Friend",
    "Friendship",
    "FriendshipStatus",
    "FriendshipRepository",
    "FriendService",
    "router",
    "FriendErrorCode",
    "SelfFriendshipException",
    "FriendshipAlreadyExistsException",
    "FriendRequestNotFoundException",
    "FriendshipNotFoundException",
]
