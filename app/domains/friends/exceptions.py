"""Friends 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, ConflictException, NotFoundException


class FriendErrorCode(str, Enum):
    """친구 도메인 에러 코드"""

    SELF_FRIENDSHIP = "SELF_FRIENDSHIP"
    FRIENDSHIP_ALREADY_EXISTS = "FRIENDSHIP_ALREADY_EXISTS"
    FRIEND_REQUEST_NOT_FOUND = "FRIEND_REQUEST_NOT_FOUND"
    FRIENDSHIP_NOT_FOUND = "FRIENDSHIP_NOT_FOUND"


class SelfFriendshipException(BadRequestException):
    """자기 자신에게 친구 요청을 보낸 경우"""

    def __init__(self, username: str):
        super().__init__(
            message="자기 자신에게 친구 요청을 보낼 수 없습니다.",
            error_code=FriendErrorCode.SELF_FRIENDSHIP,
            detail={"username": username},
        )


class FriendshipAlreadyExistsException(ConflictException):
    """이미 요청 중이거나 친구인 경우"""

    def __init__(self, sender: str, receiver: str, status: str):
        super().__init__(
            message="이미 친구이거나 친구 요청이 진행 중입니다.",
            error_code=FriendErrorCode.FRIENDSHIP_ALREADY_EXISTS,
            detail={"sender": sender, "receiver": receiver, "status": status},
        )


class FriendRequestNotFoundException(NotFoundException):
    """수락할 친구 요청이 없는 경우"""

    def __init__(self, sender: str, receiver: str):
        super().__init__(
            message="대기 중인 친구 요청을 찾을 수 없습니다.",
            error_code=FriendErrorCode.FRIEND_REQUEST_NOT_FOUND,
            detail={"sender": sender, "receiver": receiver},
        )


class FriendshipNotFoundException(NotFoundException):
    """삭제할 친구 관계가 없는 경우"""

    def __init__(self, username: str, friend: str):
        super().__init__(
            message="친구 관계를 찾을 수 없습니다.",
            error_code=FriendErrorCode.FRIENDSHIP_NOT_FOUND,
            detail={"username": username, "friend": friend},
        )
