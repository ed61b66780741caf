"""Firebase Admin 앱 초기화

FCM 푸시 발송과 ID 토큰 검증이 같은 Firebase 앱 인스턴스를 공유합니다.
"""

from functools import lru_cache

import firebase_admin
from firebase_admin import credentials

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_firebase_app() -> firebase_admin.App:
    """Firebase 앱 싱글톤 생성 (캐시됨)

    서비스 계정 파일이 설정되어 있으면 해당 자격 증명을, 아니면
    Application Default Credentials를 사용합니다.

    Returns:
        firebase_admin.App 인스턴스
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        # 기본 앱이 아직 초기화되지 않음
        if settings.firebase_credentials_path:
            cred = credentials.Certificate(settings.firebase_credentials_path)
        else:
            cred = credentials.ApplicationDefault()

    app = firebase_admin.initialize_app(cred)
    logger.info(
        "Firebase app initialized",
        extra={"credentials": settings.firebase_credentials_path or "default"},
    )
    return app
