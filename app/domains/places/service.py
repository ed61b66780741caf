"""Places 도메인 서비스"""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.places.exceptions import PoiNotFoundException
from app.domains.places.models import PointOfInterest
from app.domains.places.repository import PlaceRepository
from app.domains.places.schemas import PoiCreate
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)


class PlaceService:
    """관심 장소 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = PlaceRepository(session)
        self.user_repository = UserRepository(session)

    async def list_pois(self, user: str) -> list[PointOfInterest]:
        """사용자의 장소 목록 조회"""
        return list(await self.repository.list_by_owner(user))

    async def add_poi(self, user: str, data: PoiCreate) -> PointOfInterest:
        """장소 등록

        Args:
            user: 등록하는 사용자 이름
            data: 장소 정보

        Returns:
            생성된 장소 (mark_id는 서버에서 생성)
        """
        await self.user_repository.create_if_absent(user)
        poi = PointOfInterest(
            mark_id=uuid.uuid4().hex,
            owner=user,
            **data.model_dump(),
        )
        created = await self.repository.create(poi)

        logger.info(
            "Point of interest added",
            extra={
                "request_id": get_request_id(),
                "user": user,
                "mark_id": created.mark_id,
                "type": created.type,
            },
        )
        return created

    async def delete_poi(self, user: str, mark_id: str) -> None:
        """장소 삭제

        Raises:
            PoiNotFoundException: 장소가 없거나 user 소유가 아닌 경우
        """
        poi = await self.repository.get_by_mark_id(mark_id)
        if poi is None or poi.owner != user:
            raise PoiNotFoundException(mark_id=mark_id)

        await self.repository.delete(poi)
        logger.info(
            "Point of interest deleted",
            extra={"request_id": get_request_id(), "user": user, "mark_id": mark_id},
        )
