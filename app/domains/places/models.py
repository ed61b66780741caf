"""Places 도메인 모델 정의"""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class PointOfInterest(Base):
    """관심 장소 모델

    사용자가 지도에 표시한 장소입니다. type은 추천 모델이 돌려주는
    장소 카테고리와 대소문자 구분 없이 비교됩니다.
    """

    __tablename__ = "points_of_interest"

    mark_id: Mapped[str] = mapped_column(
        String(64), primary_key=True, comment="장소 식별자"
    )
    owner: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        comment="등록한 사용자 이름",
    )
    address: Mapped[str] = mapped_column(
        String(512), nullable=False, default="", comment="역지오코딩된 주소"
    )
    type: Mapped[str] = mapped_column(
        String(128), nullable=False, comment="장소 카테고리"
    )
    latitude: Mapped[float] = mapped_column(Float, nullable=False, comment="위도")
    longitude: Mapped[float] = mapped_column(Float, nullable=False, comment="경도")
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="사용자가 지정한 이름"
    )
    phone_number: Mapped[str] = mapped_column(
        String(64), nullable=False, default="", comment="전화번호"
    )
    visibility: Mapped[str] = mapped_column(
        String(32), nullable=False, default="public", comment="공개 범위"
    )
    url: Mapped[str] = mapped_column(
        String(1024), nullable=False, default="", comment="연결된 URL"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )

    __table_args__ = (Index("ix_points_of_interest_owner", "owner"),)

    def __repr__(self) -> str:
        return (
            f"<PointOfInterest(mark_id={self.mark_id}, owner={self.owner}, "
            f"type={self.type})>"
        )
