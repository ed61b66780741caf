"""Maintenance 도메인 서비스

만료된 알림 이력과 라이브 이벤트를 주기적으로 정리합니다.
"""

import asyncio
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.logging import get_logger
from app.core.push import get_push_client
from app.core.schemas import SweepReport
from app.domains.live_events.service import LiveEventService
from app.domains.notifications.service import NotificationService
from app.domains.recommendations.client import get_context_client
from app.domains.recommendations.service import RecommendationService

logger = get_logger(__name__)


async def run_sweeps(session: AsyncSession, batch_size: int) -> list[SweepReport]:
    """알림 이력 정리 후 라이브 이벤트 정리를 차례로 실행

    Args:
        session: DB 세션 (커밋은 호출자 책임)
        batch_size: 한 번에 읽을 사용자 수

    Returns:
        작업별 정리 결과
    """
    notifier = NotificationService(session, get_push_client())
    recommendations = RecommendationService(session, get_context_client(), notifier)
    live_events = LiveEventService(session)

    return [
        await recommendations.clean_expired_recommended_poi(batch_size),
        await live_events.clear_expired_live_events(batch_size),
    ]


class SweepScheduler:
    """주기적 정리 작업 스케줄러

    애플리케이션 lifespan에서 시작/종료되며, 이전 실행이 끝나지 않았으면
    새 실행을 건너뜁니다.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        settings: Settings,
    ):
        self.session_factory = session_factory
        self.interval_seconds = settings.sweep_interval_seconds
        self.batch_size = settings.sweep_batch_size
        self.is_running = False
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> Optional[list[SweepReport]]:
        """정리 작업 한 번 실행

        Returns:
            작업별 정리 결과. 이미 실행 중이면 None
        """
        if self.is_running:
            logger.warning("Sweep already running, skipping")
            return None

        self.is_running = True
        try:
            async with self.session_factory() as session:
                try:
                    reports = await run_sweeps(session, self.batch_size)
                    await session.commit()
                except SQLAlchemyError:
                    await session.rollback()
                    raise
            return reports
        finally:
            self.is_running = False

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.run_once()
            except Exception:
                # 다음 주기에 다시 시도
                logger.exception("Scheduled sweep failed")

    def start(self) -> None:
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self._loop(), name="sweep-scheduler")
        logger.info(
            "Sweep scheduler started",
            extra={"interval_seconds": self.interval_seconds},
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Sweep scheduler stopped")
