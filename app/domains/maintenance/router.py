"""Maintenance 도메인 라우터 (내부 API Key 필요)"""

from fastapi import APIRouter, Depends, Request

from app.core.dependencies import verify_internal_api_key
from app.core.schemas import APIResponse, create_response
from app.domains.maintenance.schemas import SweepRunResponse
from app.domains.maintenance.service import SweepScheduler

router = APIRouter()


def get_sweep_scheduler(request: Request) -> SweepScheduler:
    """lifespan에서 만든 SweepScheduler 의존성"""
    return request.app.state.sweep_scheduler


@router.post(
    "/sweep",
    response_model=APIResponse[SweepRunResponse],
    dependencies=[Depends(verify_internal_api_key)],
)
async def run_sweep(scheduler: SweepScheduler = Depends(get_sweep_scheduler)):
    """만료 데이터 정리 작업을 즉시 한 번 실행"""
    reports = await scheduler.run_once()
    if reports is None:
        return create_response(
            data=SweepRunResponse(status="skipped"),
            message="정리 작업이 이미 실행 중입니다.",
        )
    return create_response(
        data=SweepRunResponse(status="completed", reports=reports),
        message="정리 작업을 완료했습니다.",
    )
