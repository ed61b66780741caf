"""Users 도메인 모델 정의

사용자 이름(인증 토큰의 사용자 클레임)이 곧 기본 키입니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """사용자 모델

    추천/친구/라이브 이벤트 요청에서 처음 등장할 때 생성되며,
    푸시 발송에 쓰이는 FCM 기기 토큰을 보관합니다.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(128), primary_key=True, comment="사용자 이름"
    )
    fcm_token: Mapped[Optional[str]] = mapped_column(
        String(512), nullable=True, comment="FCM 기기 토큰"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<User(username={self.username}, "
            f"has_token={self.fcm_token is not None})>"
        )
