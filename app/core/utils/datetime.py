"""날짜/시간 유틸리티

추천 이력과 라이브 이벤트는 epoch 초(int) 단위로 시각을 저장합니다.
"""

from datetime import datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def now_epoch_seconds() -> int:
    """현재 시각을 epoch 초(정수, 내림)로 반환"""
    return int(now_utc().timestamp())


def seconds_since(epoch_seconds: int, now: int | None = None) -> int:
    """epoch 초로 기록된 시각으로부터 경과한 초

    Args:
        epoch_seconds: 기준 시각 (epoch 초)
        now: 현재 시각 (생략 시 now_epoch_seconds())

    Returns:
        경과 시간 (초). 미래 시각이면 음수
    """
    if now is None:
        now = now_epoch_seconds()
    return now - epoch_seconds
