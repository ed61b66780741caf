"""Friends 도메인 모델 정의"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class FriendshipStatus(str, Enum):
    """친구 관계 상태"""

    PENDING = "pending"
    ACCEPTED = "accepted"


class Friendship(Base):
    """친구 관계 모델

    requester가 addressee에게 보낸 요청 한 건이 한 행입니다.
    수락되면 양쪽 모두의 친구 목록에 나타납니다.
    """

    __tablename__ = "friendships"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    requester: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        comment="요청을 보낸 사용자",
    )
    addressee: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        comment="요청을 받은 사용자",
    )
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=FriendshipStatus.PENDING.value,
        comment="pending | accepted",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="요청 일시",
    )
    accepted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="수락 일시"
    )

    __table_args__ = (
        UniqueConstraint("requester", "addressee", name="uq_friendships_pair"),
        CheckConstraint("requester <> addressee", name="ck_friendships_not_self"),
        Index("ix_friendships_addressee", "addressee"),
    )

    @property
    def is_accepted(self) -> bool:
        return self.status == FriendshipStatus.ACCEPTED.value

    def other(self, username: str) -> str:
        """username 기준 상대방 이름"""
        return self.addressee if self.requester == username else self.requester

    def __repr__(self) -> str:
        return (
            f"<Friendship(requester={self.requester}, "
            f"addressee={self.addressee}, status={self.status})>"
        )
