"""create_live_events_and_recommended_pois

Revision ID: b83e5d10c4a2
Revises: 4f1c2a9d7e01
Create Date: 2026-10-12 14:30:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b83e5d10c4a2"
down_revision: Union[str, None] = "4f1c2a9d7e01"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: live_events, recommended_pois 테이블 생성"""
    op.create_table(
        "live_events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner", sa.String(128), nullable=False, comment="이벤트를 연 사용자"),
        sa.Column("name", sa.String(255), nullable=False, comment="이벤트 이름"),
        sa.Column("address", sa.String(512), nullable=False, comment="이벤트 장소 주소"),
        sa.Column(
            "expiration_date",
            sa.BigInteger(),
            nullable=False,
            comment="만료 시각 (epoch 초)",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.ForeignKeyConstraint(["owner"], ["users.username"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_live_events_owner_expiration",
        "live_events",
        ["owner", "expiration_date"],
        unique=False,
    )

    # (username, mark_id) 유니크 제약이 중복 알림 예약을 막음
    op.create_table(
        "recommended_pois",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(128), nullable=False, comment="알림 받은 사용자"),
        sa.Column("mark_id", sa.String(64), nullable=False, comment="알린 장소"),
        sa.Column(
            "notificated_date",
            sa.BigInteger(),
            nullable=False,
            comment="알림 시각 (epoch 초)",
        ),
        sa.ForeignKeyConstraint(["username"], ["users.username"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["mark_id"], ["points_of_interest.mark_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "username", "mark_id", name="uq_recommended_pois_user_mark"
        ),
    )
    op.create_index(
        "ix_recommended_pois_username_date",
        "recommended_pois",
        ["username", "notificated_date"],
        unique=False,
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: recommended_pois, live_events 테이블 삭제"""
    op.drop_index("ix_recommended_pois_username_date", table_name="recommended_pois")
    op.drop_table("recommended_pois")
    op.drop_index("ix_live_events_owner_expiration", table_name="live_events")
    op.drop_table("live_events")
