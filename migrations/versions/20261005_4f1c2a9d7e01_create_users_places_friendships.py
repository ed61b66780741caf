"""create_users_places_friendships

Revision ID: 4f1c2a9d7e01
Revises:
Create Date: 2026-10-05 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9d7e01"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: users, points_of_interest, friendships 테이블 생성"""
    op.create_table(
        "users",
        sa.Column("username", sa.String(128), nullable=False, comment="사용자 이름"),
        sa.Column("fcm_token", sa.String(512), nullable=True, comment="FCM 기기 토큰"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("username"),
    )

    op.create_table(
        "points_of_interest",
        sa.Column("mark_id", sa.String(64), nullable=False, comment="장소 식별자"),
        sa.Column("owner", sa.String(128), nullable=False, comment="등록한 사용자 이름"),
        sa.Column("address", sa.String(512), nullable=False, comment="역지오코딩된 주소"),
        sa.Column("type", sa.String(128), nullable=False, comment="장소 카테고리"),
        sa.Column("latitude", sa.Float(), nullable=False, comment="위도"),
        sa.Column("longitude", sa.Float(), nullable=False, comment="경도"),
        sa.Column("name", sa.String(255), nullable=False, comment="사용자가 지정한 이름"),
        sa.Column("phone_number", sa.String(64), nullable=False, comment="전화번호"),
        sa.Column("visibility", sa.String(32), nullable=False, comment="공개 범위"),
        sa.Column("url", sa.String(1024), nullable=False, comment="연결된 URL"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.ForeignKeyConstraint(["owner"], ["users.username"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("mark_id"),
    )
    op.create_index(
        "ix_points_of_interest_owner", "points_of_interest", ["owner"], unique=False
    )

    op.create_table(
        "friendships",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("requester", sa.String(128), nullable=False, comment="요청을 보낸 사용자"),
        sa.Column("addressee", sa.String(128), nullable=False, comment="요청을 받은 사용자"),
        sa.Column("status", sa.String(16), nullable=False, comment="pending | accepted"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="요청 일시",
        ),
        sa.Column(
            "accepted_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수락 일시",
        ),
        sa.CheckConstraint("requester <> addressee", name="ck_friendships_not_self"),
        sa.ForeignKeyConstraint(["requester"], ["users.username"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["addressee"], ["users.username"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("requester", "addressee", name="uq_friendships_pair"),
    )
    op.create_index(
        "ix_friendships_addressee", "friendships", ["addressee"], unique=False
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: friendships, points_of_interest, users 테이블 삭제"""
    op.drop_index("ix_friendships_addressee", table_name="friendships")
    op.drop_table("friendships")
    op.drop_index("ix_points_of_interest_owner", table_name="points_of_interest")
    op.drop_table("points_of_interest")
    op.drop_table("users")
