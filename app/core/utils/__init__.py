"""유틸리티 모듈"""

from app.core.utils.datetime import (
    UTC,
    now_epoch_seconds,
    now_utc,
    seconds_since,
)
from app.core.utils.geo import (
    EARTH_RADIUS_M,
    GeoPoint,
    distance_between,
    haversine_distance,
)
from app.core.utils.time import measure_time

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "now_epoch_seconds",
    "seconds_since",
    # geo
    "EARTH_RADIUS_M",
    "GeoPoint",
    "haversine_distance",
    "distance_between",
    # time measurement
    "measure_time",
]
