"""Recommendations 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.recommendations.models import RecommendedPoi


class RecommendedPoiRepository:
    """장소 알림 이력 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, username: str, mark_id: str) -> Optional[RecommendedPoi]:
        """(사용자, 장소) 이력 조회"""
        result = await self.session.execute(
            select(RecommendedPoi).where(
                RecommendedPoi.username == username,
                RecommendedPoi.mark_id == mark_id,
            )
        )
        return cast(Optional[RecommendedPoi], result.scalar_one_or_none())

    async def list_current_mark_ids(self, username: str, stale_before: int) -> set[str]:
        """아직 쿨다운 중인 이력의 mark_id 집합

        Args:
            username: 사용자 이름
            stale_before: 이 시각(epoch 초) 이하에 알린 이력은 만료로 간주

        Returns:
            notificated_date > stale_before 인 이력의 mark_id
        """
        result = await self.session.execute(
            select(RecommendedPoi.mark_id).where(
                RecommendedPoi.username == username,
                RecommendedPoi.notificated_date > stale_before,
            )
        )
        return set(result.scalars().all())

    async def list_stale_by_user(
        self, username: str, stale_before: int
    ) -> Sequence[RecommendedPoi]:
        """만료된(notificated_date <= stale_before) 이력 목록"""
        result = await self.session.execute(
            select(RecommendedPoi)
            .where(
                RecommendedPoi.username == username,
                RecommendedPoi.notificated_date <= stale_before,
            )
            .order_by(RecommendedPoi.id)
        )
        return cast(Sequence[RecommendedPoi], result.scalars().all())

    async def add_if_absent(
        self, username: str, mark_id: str, notificated_date: int
    ) -> Optional[int]:
        """이력이 없을 때만 생성 (INSERT ... ON CONFLICT DO NOTHING)

        Returns:
            생성된 이력 ID. 같은 (username, mark_id) 이력이 이미 있으면 None
        """
        stmt = (
            insert(RecommendedPoi)
            .values(
                username=username,
                mark_id=mark_id,
                notificated_date=notificated_date,
            )
            .on_conflict_do_nothing(
                index_elements=[RecommendedPoi.username, RecommendedPoi.mark_id]
            )
            .returning(RecommendedPoi.id)
        )
        result = await self.session.execute(stmt)
        return cast(Optional[int], result.scalar_one_or_none())

    async def delete(self, record: RecommendedPoi) -> None:
        await self.session.delete(record)
        await self.session.flush()

    async def delete_by_id(self, record_id: int) -> None:
        await self.session.execute(
            delete(RecommendedPoi).where(RecommendedPoi.id == record_id)
        )
