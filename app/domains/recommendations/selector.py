"""가장 가까운 관심 장소 선택

카테고리(대소문자 무시)가 일치하고 제외 목록에 없는 후보 중 사용자 위치에서
대원 거리가 가장 짧은 장소를 고릅니다. 거리가 같으면 입력 순서상 먼저 나온
장소가 선택됩니다.
"""

from typing import Container, Iterable, Optional, Protocol, TypeVar

from app.core.utils.geo import GeoPoint, haversine_distance

DEFAULT_MAX_DISTANCE_M = 3000.0


class PoiCandidate(Protocol):
    mark_id: str
    type: str
    latitude: float
    longitude: float


PoiT = TypeVar("PoiT", bound=PoiCandidate)


def matches_category(poi: PoiCandidate, category: str) -> bool:
    """장소 타입과 카테고리가 대소문자 무시하고 정확히 같은지"""
    return poi.type.lower() == category.lower()


def select_nearest_poi(
    position: GeoPoint,
    candidates: Iterable[PoiT],
    category: str,
    exclude: Container[str] = frozenset(),
    max_distance_m: float = DEFAULT_MAX_DISTANCE_M,
) -> Optional[PoiT]:
    """가장 가까운 장소 선택

    Args:
        position: 사용자 위치
        candidates: 후보 장소 (순서가 동률 판정에 쓰임)
        category: 추천 카테고리
        exclude: 제외할 mark_id 집합
        max_distance_m: 허용 최대 거리 (미터)

    Returns:
        선택된 장소. 후보가 없거나 가장 가까운 장소가 max_distance_m보다
        멀면 None
    """
    nearest: Optional[PoiT] = None
    nearest_distance = float("inf")

    for poi in candidates:
        if not matches_category(poi, category) or poi.mark_id in exclude:
            continue
        distance = haversine_distance(
            position.latitude, position.longitude, poi.latitude, poi.longitude
        )
        if distance < nearest_distance:
            nearest, nearest_distance = poi, distance

    if nearest is None or nearest_distance > max_distance_m:
        return None
    return nearest
