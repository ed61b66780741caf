"""Places 도메인 모듈

사용자가 등록한 관심 장소(Point of Interest)를 관리합니다.
추천 도메인은 이 장소들 중 가장 가까운 곳을 골라 알림을 보냅니다.
"""

from app.domains.places.exceptions import PlaceErrorCode, PoiNotFoundException
from app.domains.places.models import PointOfInterest
from app.domains.places.repository import PlaceRepository
from app.domains.places.router import router
from app.domains.places.schemas import PoiCreate, PoiResponse
from app.domains.places.service import PlaceService

__all__ = [
    "PointOfInterest",
    "PlaceRepository",
    "PlaceService",
    "PoiCreate",
    "PoiResponse",
    "router",
    "PlaceErrorCode",
    "PoiNotFoundException",
]
