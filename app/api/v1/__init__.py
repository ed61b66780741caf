"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from app.core.schemas import APIResponse
from app.domains.friends.router import router as friends_router
from app.domains.live_events.router import router as live_events_router
from app.domains.maintenance.router import router as maintenance_router
from app.domains.places.router import router as places_router
from app.domains.recommendations.router import router as recommendations_router
from app.domains.users.router import router as users_router

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(
    recommendations_router, prefix="/recommendation", tags=["Recommendation"]
)
api_router.include_router(places_router, prefix="/pois", tags=["Points of Interest"])
api_router.include_router(friends_router, prefix="/friends", tags=["Friends"])
api_router.include_router(
    live_events_router, prefix="/live-events", tags=["Live Events"]
)
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(
    maintenance_router, prefix="/maintenance", tags=["Maintenance"]
)


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message="Context Places API v1",
        data={
            "version": "1.0.0",
            "docs": "/docs",
        },
    )
