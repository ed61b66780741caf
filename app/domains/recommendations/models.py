"""Recommendations 도메인 모델 정의"""

from sqlalchemy import BigInteger, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class RecommendedPoi(Base):
    """장소 알림 이력

    사용자에게 장소를 알린 시각을 기록합니다. (username, mark_id) 당 한 행만
    존재하며, 쿨다운이 지난 행은 새 알림 전에 또는 정리 작업에서 삭제됩니다.
    """

    __tablename__ = "recommended_pois"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        comment="알림 받은 사용자",
    )
    mark_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("points_of_interest.mark_id", ondelete="CASCADE"),
        nullable=False,
        comment="알린 장소",
    )
    notificated_date: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="알림 시각 (epoch 초)"
    )

    __table_args__ = (
        UniqueConstraint("username", "mark_id", name="uq_recommended_pois_user_mark"),
        Index("ix_recommended_pois_username_date", "username", "notificated_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<RecommendedPoi(username={self.username}, mark_id={self.mark_id}, "
            f"notificated_date={self.notificated_date})>"
        )
