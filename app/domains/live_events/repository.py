"""Live Events 도메인 리포지토리"""

from typing import Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.live_events.models import LiveEvent


class LiveEventRepository:
    """라이브 이벤트 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active_by_owners(
        self, owners: Sequence[str], now: int
    ) -> list[LiveEvent]:
        """만료되지 않은 이벤트 조회 (owners 순서 유지)

        Args:
            owners: 사용자 이름 목록
            now: 현재 epoch 초

        Returns:
            expiration_date > now 인 이벤트 목록
        """
        if not owners:
            return []
        result = await self.session.execute(
            select(LiveEvent)
            .where(LiveEvent.owner.in_(owners), LiveEvent.expiration_date > now)
            .order_by(LiveEvent.expiration_date, LiveEvent.id)
        )
        rank = {owner: index for index, owner in enumerate(owners)}
        return sorted(result.scalars().all(), key=lambda event: rank[event.owner])

    async def list_expired_by_owner(self, owner: str, now: int) -> Sequence[LiveEvent]:
        """만료된(expiration_date < now) 이벤트 조회"""
        result = await self.session.execute(
            select(LiveEvent)
            .where(LiveEvent.owner == owner, LiveEvent.expiration_date < now)
            .order_by(LiveEvent.id)
        )
        return cast(Sequence[LiveEvent], result.scalars().all())

    async def create(self, event: LiveEvent) -> LiveEvent:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event: LiveEvent) -> None:
        await self.session.delete(event)
        await self.session.flush()
