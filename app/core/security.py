"""요청 복호화 및 ID 토큰 검증

- RequestDecryptor: 클라이언트가 서버 공개키로 암호화한 요청 본문을 복호화
- FirebaseTokenVerifier: Authorization 헤더의 Firebase ID 토큰을 검증
"""

import asyncio
import base64
import binascii
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions

from app.core.config import Settings, settings
from app.core.exceptions import BadRequestException, ErrorCode
from app.core.firebase import get_firebase_app
from app.core.logging import get_logger

logger = get_logger(__name__)


class InvalidEncryptedBodyException(BadRequestException):
    """복호화 또는 JSON 파싱에 실패한 요청 본문"""

    def __init__(self, reason: str):
        super().__init__(
            message="요청 본문을 해석할 수 없습니다.",
            error_code=ErrorCode.INVALID_REQUEST_BODY,
            detail={"reason": reason},
        )


def load_private_key(settings: Settings) -> rsa.RSAPrivateKey:
    """설정에서 RSA 개인키 로드

    Args:
        settings: 애플리케이션 설정

    Returns:
        RSA 개인키

    Raises:
        ValueError: 개인키가 설정되지 않았거나 RSA 키가 아닌 경우
    """
    if settings.rsa_private_key:
        pem = settings.rsa_private_key.encode("utf-8")
    elif settings.rsa_private_key_path:
        pem = Path(settings.rsa_private_key_path).read_bytes()
    else:
        raise ValueError(
            "RSA private key is not configured. "
            "Set RSA_PRIVATE_KEY_PATH or RSA_PRIVATE_KEY."
        )

    password = (
        settings.rsa_private_key_password.encode("utf-8")
        if settings.rsa_private_key_password
        else None
    )
    key = serialization.load_pem_private_key(pem, password=password)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("Configured private key is not an RSA key.")
    return key


class RequestDecryptor:
    """암호화된 요청 본문 복호화기

    본문은 base64로 인코딩된 RSA 암호문이며 PKCS#1 v1.5 패딩을 사용합니다.
    """

    def __init__(self, private_key: rsa.RSAPrivateKey):
        self.private_key = private_key

    def decrypt(self, ciphertext: str | bytes) -> str:
        """base64 암호문을 UTF-8 평문으로 복호화

        Raises:
            InvalidEncryptedBodyException: base64/복호화/디코딩 실패 시
        """
        try:
            raw = base64.b64decode(ciphertext, validate=False)
            plaintext = self.private_key.decrypt(raw, padding.PKCS1v15())
            return plaintext.decode("utf-8")
        except (binascii.Error, ValueError, UnicodeDecodeError) as e:
            logger.warning("Request body decryption failed", extra={"error": str(e)})
            raise InvalidEncryptedBodyException(reason="decryption failed")

    def decrypt_json(self, ciphertext: str | bytes) -> dict[str, Any]:
        """암호문을 복호화한 뒤 JSON 객체로 파싱"""
        plaintext = self.decrypt(ciphertext)
        try:
            body = json.loads(plaintext)
        except json.JSONDecodeError:
            raise InvalidEncryptedBodyException(reason="plaintext is not JSON")
        if not isinstance(body, dict):
            raise InvalidEncryptedBodyException(
                reason="plaintext is not a JSON object"
            )
        return body


@lru_cache
def _create_request_decryptor() -> RequestDecryptor:
    """복호화기 싱글톤 생성 (캐시됨)"""
    return RequestDecryptor(load_private_key(settings))


def get_request_decryptor() -> RequestDecryptor:
    """FastAPI DI용 복호화기 의존성"""
    return _create_request_decryptor()


class FirebaseTokenVerifier:
    """Firebase ID 토큰 검증기"""

    def __init__(self, user_claim: str = "uid", app=None):
        """
        Args:
            user_claim: 사용자 이름으로 사용할 토큰 클레임
            app: Firebase 앱 (생략 시 첫 검증 때 기본 앱을 초기화)
        """
        self.user_claim = user_claim
        self.app = app

    async def verify(self, token: str) -> Optional[str]:
        """토큰을 검증하고 사용자 이름을 반환

        Returns:
            검증된 사용자 이름, 검증 실패 시 None
        """
        try:
            decoded = await asyncio.to_thread(
                auth.verify_id_token, token, self.app or get_firebase_app()
            )
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            logger.warning("ID token verification failed", extra={"error": str(e)})
            return None

        user = decoded.get(self.user_claim)
        return str(user) if user is not None else None


@lru_cache
def _create_token_verifier() -> FirebaseTokenVerifier:
    """토큰 검증기 싱글톤 생성 (캐시됨)"""
    return FirebaseTokenVerifier(user_claim=settings.firebase_user_claim)


def get_token_verifier() -> FirebaseTokenVerifier:
    """FastAPI DI용 토큰 검증기 의존성"""
    return _create_token_verifier()
