"""Recommendations 도메인 서비스

추천 모델 서버가 돌려준 카테고리로 가까운 관심 장소를 찾아 알리고,
같은 장소를 쿨다운 시간 안에 다시 알리지 않도록 이력을 관리합니다.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.schemas import SweepReport
from app.core.utils.datetime import now_epoch_seconds, seconds_since
from app.core.utils.geo import GeoPoint
from app.core.utils.time import measure_time
from app.domains.friends.repository import FriendshipRepository
from app.domains.notifications.schemas import NotificationKind
from app.domains.notifications.service import NotificationService
from app.domains.places.models import PointOfInterest
from app.domains.places.repository import PlaceRepository
from app.domains.recommendations.client import ContextAwareClient
from app.domains.recommendations.exceptions import ContextAwareAPIException
from app.domains.recommendations.repository import RecommendedPoiRepository
from app.domains.recommendations.schemas import (
    RecommendationAccuracy,
    RecommendationRequest,
    RecommendedCategory,
    ValidationRequest,
)
from app.domains.recommendations.selector import select_nearest_poi
from app.domains.users.service import UserService

logger = get_logger(__name__)

PLACE_RECOMMENDATION_TITLE = "You may be interested to this place:"
VALIDITY_RECOMMENDATION_TITLE = "You are near to this place:"


class RecommendationService:
    """장소 추천 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        client: ContextAwareClient,
        notifier: NotificationService,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.session = session
        self.client = client
        self.notifier = notifier
        self.repository = RecommendedPoiRepository(session)
        self.place_repository = PlaceRepository(session)
        self.friend_repository = FriendshipRepository(session)
        self.user_service = UserService(session)
        self.max_distance_m = settings.recommendation_max_distance_m
        self.cooldown_seconds = settings.recommendation_cooldown_seconds

    def stale_before(self, now: int) -> int:
        """이 시각 이하에 알린 이력은 만료 (경과 시간 >= 쿨다운)"""
        return now - self.cooldown_seconds

    async def recommend_place_of_category(
        self, request: RecommendationRequest
    ) -> Optional[RecommendedCategory]:
        """추천 카테고리를 받아 친구/본인 장소 중 가까운 곳을 알림

        장소를 찾지 못하거나 알림이 억제되어도 카테고리는 그대로 반환합니다.

        Args:
            request: 추천 요청

        Returns:
            추천 카테고리. 모델 서버 호출에 실패하면 None
        """
        try:
            category = await self.client.get_place_category(request)
        except ContextAwareAPIException as e:
            logger.error(
                "Place category recommendation failed",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "error": e.original_error,
                },
            )
            return None

        logger.info(
            "Place category recommended",
            extra={
                "request_id": get_request_id(),
                "user": request.user,
                "place_category": category.place_category,
            },
        )

        poi = await self.find_nearest_poi_in_social_scope(
            category.place_category, request
        )
        if poi is None:
            logger.warning(
                "No point of interest near user",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "place_category": category.place_category,
                },
            )
        else:
            await self.notify_once(
                poi,
                request.user,
                PLACE_RECOMMENDATION_TITLE,
                NotificationKind.PLACE_RECOMMENDATION,
            )
        return category

    async def should_advise_place_category(
        self, request: ValidationRequest
    ) -> Optional[bool]:
        """제안된 카테고리의 유효성을 확인하고 유효하면 본인 장소를 알림

        Args:
            request: 유효성 확인 요청

        Returns:
            유효 여부. 모델 서버 호출에 실패하면 None
        """
        try:
            is_valid = await self.client.get_validity(request)
        except ContextAwareAPIException as e:
            logger.error(
                "Place category validity check failed",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "error": e.original_error,
                },
            )
            return None

        if not is_valid:
            logger.warning(
                "Place category not advisable now",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "place_category": request.place_category,
                },
            )
            return False

        poi = await self.find_nearest_poi_of_user(
            request.place_category, request.to_recommendation_request()
        )
        if poi is None:
            logger.warning(
                "No personal point of interest near user",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "latitude": request.latitude,
                    "longitude": request.longitude,
                },
            )
        else:
            await self.notify_once(
                poi,
                request.user,
                VALIDITY_RECOMMENDATION_TITLE,
                NotificationKind.VALIDITY_RECOMMENDATION,
            )
        return True

    async def train_again_model(
        self, request: ValidationRequest
    ) -> Optional[RecommendationAccuracy]:
        """새 샘플로 모델을 재학습하고 결과를 사용자에게 알림

        Returns:
            재학습 후 정확도. 실패하면 None (재시도하지 않음)
        """
        try:
            accuracy = await self.client.train(request)
        except ContextAwareAPIException as e:
            logger.error(
                "Model retraining failed",
                extra={
                    "request_id": get_request_id(),
                    "user": request.user,
                    "error": e.original_error,
                },
            )
            return None

        logger.info(
            "Model retrained",
            extra={
                "request_id": get_request_id(),
                "user": request.user,
                "accuracy": accuracy.accuracy,
                "correct_samples": accuracy.correct_samples,
            },
        )
        await self.notifier.notify_retrained_model(
            accuracy.accuracy, accuracy.correct_samples, request.user
        )
        return accuracy

    async def find_nearest_poi_in_social_scope(
        self, category: str, request: RecommendationRequest
    ) -> Optional[PointOfInterest]:
        """친구들(친구 목록 순)과 본인 장소 중 가장 가까운 곳

        쿨다운 중인 이력에 있는 장소는 제외합니다.
        """
        await self.user_service.ensure_user(request.user)

        friends = await self.friend_repository.list_friend_usernames(request.user)
        candidates = await self.place_repository.list_by_owners(
            [*friends, request.user]
        )
        recently_notified = await self.repository.list_current_mark_ids(
            request.user, self.stale_before(now_epoch_seconds())
        )
        return select_nearest_poi(
            GeoPoint(request.latitude, request.longitude),
            candidates,
            category,
            exclude=recently_notified,
            max_distance_m=self.max_distance_m,
        )

    async def find_nearest_poi_of_user(
        self, category: str, request: RecommendationRequest
    ) -> Optional[PointOfInterest]:
        """본인 장소 중 가장 가까운 곳 (이력 제외 없음)"""
        await self.user_service.ensure_user(request.user)

        candidates = await self.place_repository.list_by_owner(request.user)
        return select_nearest_poi(
            GeoPoint(request.latitude, request.longitude),
            candidates,
            category,
            max_distance_m=self.max_distance_m,
        )

    async def can_notify_poi(
        self, poi: PointOfInterest, user: str, now: Optional[int] = None
    ) -> bool:
        """장소를 지금 알릴 수 있는지 확인

        이력이 없으면 허용, 쿨다운이 지난 이력은 삭제 후 허용, 그 외에는 억제합니다.
        """
        now = now_epoch_seconds() if now is None else now
        record = await self.repository.get(user, poi.mark_id)
        if record is None:
            return True

        if seconds_since(record.notificated_date, now) >= self.cooldown_seconds:
            await self.repository.delete(record)
            return True
        return False

    async def notify_once(
        self,
        poi: PointOfInterest,
        user: str,
        title: str,
        kind: NotificationKind,
    ) -> bool:
        """쿨다운을 지키며 장소를 한 번만 알림

        알림 전에 이력을 먼저 예약(create-if-absent)하므로 동시 요청이 같은
        장소를 두 번 알리지 않습니다. 발송에 실패하면 예약을 되돌립니다.

        Returns:
            알림 발송 여부
        """
        now = now_epoch_seconds()
        extra = {"request_id": get_request_id(), "user": user, "mark_id": poi.mark_id}

        if not await self.can_notify_poi(poi, user, now):
            logger.warning("Point of interest recently notified", extra=extra)
            return False

        record_id = await self.repository.add_if_absent(user, poi.mark_id, now)
        if record_id is None:
            logger.warning("Notification already reserved", extra=extra)
            return False

        delivered = await self.notifier.notify_place_suggestion(poi, user, title, kind)
        if not delivered:
            await self.repository.delete_by_id(record_id)
            logger.warning("Notification reservation released", extra=extra)
        return delivered

    async def clean_expired_recommended_poi(self, batch_size: int = 100) -> SweepReport:
        """모든 사용자의 만료된 알림 이력 삭제

        레코드마다 savepoint를 사용하므로 한 건이 실패해도 나머지는 계속
        진행합니다.

        Args:
            batch_size: 한 번에 읽을 사용자 수

        Returns:
            정리 결과
        """
        report = SweepReport(name="recommended_pois")
        stale_before = self.stale_before(now_epoch_seconds())

        with measure_time() as timer:
            async for usernames in self.user_service.iter_usernames(batch_size):
                for username in usernames:
                    report.users_scanned += 1
                    for record in await self.repository.list_stale_by_user(
                        username, stale_before
                    ):
                        record_id = record.id
                        try:
                            async with self.session.begin_nested():
                                await self.repository.delete(record)
                        except SQLAlchemyError as e:
                            report.failures.append(f"{username}/{record_id}: {e}")
                            logger.error(
                                "Failed to remove expired recommendation record",
                                extra={
                                    "user": username,
                                    "record_id": record_id,
                                    "error": str(e),
                                },
                            )
                            continue
                        report.removed += 1

        logger.info(
            "Expired recommendation records swept",
            extra={
                "users_scanned": report.users_scanned,
                "removed": report.removed,
                "failures": len(report.failures),
                "elapsed_ms": round(timer["elapsed_ms"], 2),
            },
        )
        return report
