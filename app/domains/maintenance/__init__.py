"""Maintenance 도메인 모듈

만료된 알림 이력과 라이브 이벤트의 주기적 정리를 담당합니다.
"""

from app.domains.maintenance.router import router
from app.domains.maintenance.schemas import SweepRunResponse
from app.domains.maintenance.service import SweepScheduler, run_sweeps

__all__ = [
    "SweepRunResponse",
    "SweepScheduler",
    "run_sweeps",
    "router",
]
