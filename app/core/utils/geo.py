"""지리 좌표 유틸리티"""

import math
from dataclasses import dataclass

# 평균 지구 반지름 (미터)
EARTH_RADIUS_M = 6371000.0


@dataclass(frozen=True)
class GeoPoint:
    """위도/경도 좌표"""

    latitude: float
    longitude: float


def haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """두 좌표 사이의 대원 거리 (미터)

    Args:
        lat1: 첫 번째 지점 위도
        lon1: 첫 번째 지점 경도
        lat2: 두 번째 지점 위도
        lon2: 두 번째 지점 경도

    Returns:
        float: 거리 (미터)
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlam = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    """GeoPoint 간 거리 (미터)"""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
