"""Places 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.places.models import PointOfInterest


class PlaceRepository:
    """관심 장소 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_mark_id(self, mark_id: str) -> Optional[PointOfInterest]:
        result = await self.session.execute(
            select(PointOfInterest).where(PointOfInterest.mark_id == mark_id)
        )
        return cast(Optional[PointOfInterest], result.scalar_one_or_none())

    async def list_by_owner(self, owner: str) -> Sequence[PointOfInterest]:
        """사용자 한 명의 장소 목록 (등록 순)"""
        result = await self.session.execute(
            select(PointOfInterest)
            .where(PointOfInterest.owner == owner)
            .order_by(PointOfInterest.created_at, PointOfInterest.mark_id)
        )
        return cast(Sequence[PointOfInterest], result.scalars().all())

    async def list_by_owners(self, owners: Sequence[str]) -> list[PointOfInterest]:
        """여러 사용자의 장소를 한 번의 쿼리로 조회

        결과는 owners에 주어진 사용자 순서, 같은 사용자 안에서는 등록 순으로
        정렬됩니다.

        Args:
            owners: 사용자 이름 목록 (순서 유지)

        Returns:
            장소 목록
        """
        if not owners:
            return []
        result = await self.session.execute(
            select(PointOfInterest)
            .where(PointOfInterest.owner.in_(owners))
            .order_by(PointOfInterest.created_at, PointOfInterest.mark_id)
        )
        rank = {owner: index for index, owner in enumerate(owners)}
        return sorted(result.scalars().all(), key=lambda poi: rank[poi.owner])

    async def create(self, poi: PointOfInterest) -> PointOfInterest:
        self.session.add(poi)
        await self.session.flush()
        await self.session.refresh(poi)
        return poi

    async def delete(self, poi: PointOfInterest) -> None:
        await self.session.delete(poi)
        await self.session.flush()
