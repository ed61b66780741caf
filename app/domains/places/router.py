"""Places 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.core.schemas import APIResponse, create_response
from app.domains.places.schemas import PoiCreate, PoiResponse
from app.domains.places.service import PlaceService

router = APIRouter()


def get_place_service(session: AsyncSession = Depends(get_db)) -> PlaceService:
    """PlaceService 의존성"""
    return PlaceService(session)


@router.get("", response_model=APIResponse[list[PoiResponse]])
async def list_pois(
    user: str = Depends(get_current_user),
    service: PlaceService = Depends(get_place_service),
):
    """내 장소 목록 조회"""
    pois = await service.list_pois(user)
    return create_response(
        data=[PoiResponse.model_validate(poi) for poi in pois],
        message="장소 목록을 조회했습니다.",
    )


@router.post("", response_model=APIResponse[PoiResponse], status_code=201)
async def add_poi(
    body: PoiCreate,
    user: str = Depends(get_current_user),
    service: PlaceService = Depends(get_place_service),
):
    """장소 등록"""
    poi = await service.add_poi(user, body)
    return create_response(
        data=PoiResponse.model_validate(poi),
        message="장소를 등록했습니다.",
    )


@router.delete("/{mark_id}", status_code=204)
async def delete_poi(
    mark_id: str,
    user: str = Depends(get_current_user),
    service: PlaceService = Depends(get_place_service),
):
    """장소 삭제"""
    await service.delete_poi(user, mark_id)
    return None
