"""공통 의존성 함수 정의

이 모듈은 FastAPI 엔드포인트에서 사용되는 공통 의존성 함수들을 정의합니다.
"""

from typing import Any, Optional

from fastapi import Depends, Header, Request

from app.core.config import settings
from app.core.exceptions import (
    ErrorCode,
    ForbiddenException,
    UnauthorizedException,
)
from app.core.security import (
    FirebaseTokenVerifier,
    RequestDecryptor,
    get_request_decryptor,
    get_token_verifier,
)


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (스케줄러/운영 도구 호출용)

    Args:
        x_internal_api_key: 요청 헤더의 X-Internal-Api-Key 값

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우

    Example:
        @router.post("/sweep", dependencies=[Depends(verify_internal_api_key)])
        async def sweep():
            ...
    """
    if x_internal_api_key != settings.internal_api_key:
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    verifier: FirebaseTokenVerifier = Depends(get_token_verifier),
) -> str:
    """Bearer ID 토큰으로 현재 사용자 이름 확인

    Raises:
        UnauthorizedException: 토큰이 없는 경우 (TOKEN_NOT_AVAILABLE)
        ForbiddenException: 토큰 검증에 실패한 경우 (INVALID_TOKEN)
    """
    token = _extract_bearer_token(authorization)
    if token is None:
        raise UnauthorizedException(
            message="Token not available.",
            error_code=ErrorCode.TOKEN_NOT_AVAILABLE,
        )

    username = await verifier.verify(token)
    if username is None:
        raise ForbiddenException(
            message="유효하지 않은 토큰입니다.",
            error_code=ErrorCode.INVALID_TOKEN,
        )
    return username


async def get_decrypted_body(
    request: Request,
    decryptor: RequestDecryptor = Depends(get_request_decryptor),
) -> dict[str, Any]:
    """암호화된 요청 본문을 복호화한 JSON 객체

    Raises:
        InvalidEncryptedBodyException: 복호화 또는 파싱 실패 시 (400)
    """
    raw = await request.body()
    return decryptor.decrypt_json(raw.strip())


def ensure_same_user(token_user: str, declared_user: str) -> None:
    """토큰 사용자와 요청 본문의 사용자가 같은지 확인

    Raises:
        ForbiddenException: 두 사용자가 다른 경우 (USER_MISMATCH)
    """
    if token_user != declared_user:
        raise ForbiddenException(
            message="토큰 사용자와 요청 사용자가 일치하지 않습니다.",
            error_code=ErrorCode.USER_MISMATCH,
            detail={"user": declared_user},
        )
