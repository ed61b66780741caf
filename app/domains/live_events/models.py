"""Live Events 도메인 모델 정의"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class LiveEvent(Base):
    """라이브 이벤트 모델

    expiration_date(epoch 초)가 지나면 조회 대상에서 빠지고
    정리 작업에서 삭제됩니다.
    """

    __tablename__ = "live_events"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        comment="이벤트를 연 사용자",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, comment="이벤트 이름")
    address: Mapped[str] = mapped_column(
        String(512), nullable=False, comment="이벤트 장소 주소"
    )
    expiration_date: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="만료 시각 (epoch 초)"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )

    __table_args__ = (
        Index("ix_live_events_owner_expiration", "owner", "expiration_date"),
    )

    def is_expired(self, now: int) -> bool:
        return self.expiration_date < now

    def __repr__(self) -> str:
        return (
            f"<LiveEvent(id={self.id}, owner={self.owner}, "
            f"expiration_date={self.expiration_date})>"
        )
