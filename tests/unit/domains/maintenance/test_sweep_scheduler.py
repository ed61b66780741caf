"""정리 작업 스케줄러 테스트"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.core.schemas import SweepReport
from app.domains.maintenance.service import SweepScheduler

REPORTS = [SweepReport(name="recommended_pois"), SweepReport(name="live_events")]


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def scheduler(mock_session):
    """SweepScheduler 인스턴스"""
    session_factory = MagicMock()
    session_factory.return_value.__aenter__ = AsyncMock(return_value=mock_session)
    session_factory.return_value.__aexit__ = AsyncMock(return_value=False)
    settings = Settings(sweep_interval_seconds=3600, sweep_batch_size=50)
    return SweepScheduler(session_factory, settings)


class TestRunOnce:
    """단일 실행 테스트"""

    @pytest.mark.asyncio
    async def test_runs_sweeps_and_commits(self, scheduler, mock_session):
        with patch(
            "app.domains.maintenance.service.run_sweeps",
            AsyncMock(return_value=REPORTS),
        ) as run_sweeps:
            reports = await scheduler.run_once()

        assert reports == REPORTS
        run_sweeps.assert_awaited_once_with(mock_session, 50)
        mock_session.commit.assert_awaited_once()
        assert scheduler.is_running is False

    @pytest.mark.asyncio
    async def test_skips_when_already_running(self, scheduler):
        scheduler.is_running = True

        with patch("app.domains.maintenance.service.run_sweeps") as run_sweeps:
            result = await scheduler.run_once()

        assert result is None
        run_sweeps.assert_not_called()

    @pytest.mark.asyncio
    async def test_database_error_rolls_back(self, scheduler, mock_session):
        with patch(
            "app.domains.maintenance.service.run_sweeps",
            AsyncMock(side_effect=SQLAlchemyError("connection lost")),
        ):
            with pytest.raises(SQLAlchemyError):
                await scheduler.run_once()

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_awaited()
        assert scheduler.is_running is False


class TestLifecycle:
    """시작/종료 테스트"""

    @pytest.mark.asyncio
    async def test_start_and_stop(self, scheduler):
        scheduler.start()
        task = scheduler._task
        assert task is not None and not task.done()

        # 두 번 시작해도 태스크는 하나
        scheduler.start()
        assert scheduler._task is task

        await scheduler.stop()

        assert task.cancelled()
        assert scheduler._task is None

    @pytest.mark.asyncio
    async def test_stop_without_start(self, scheduler):
        await scheduler.stop()
        assert scheduler._task is None

    @pytest.mark.asyncio
    async def test_loop_survives_database_error(self, scheduler):
        """주기 실행 중 DB 오류가 나도 다음 주기를 계속"""
        scheduler.interval_seconds = 0
        calls = 0

        async def flaky_run_once():
            nonlocal calls
            calls += 1
            if calls == 1:
                raise SQLAlchemyError("connection lost")
            if calls >= 2:
                raise asyncio.CancelledError

        scheduler.run_once = flaky_run_once

        with pytest.raises(asyncio.CancelledError):
            await scheduler._loop()

        assert calls == 2

    @pytest.mark.asyncio
    async def test_loop_survives_connection_error(self, scheduler):
        """DB 연결 거부처럼 SQLAlchemy가 감싸지 않은 오류에도 스케줄러 유지"""
        # Given
        scheduler.interval_seconds = 0
        calls = 0

        async def refusing_run_once():
            nonlocal calls
            calls += 1
            raise ConnectionRefusedError("db down")

        scheduler.run_once = refusing_run_once

        # When
        scheduler.start()
        await asyncio.sleep(0.05)

        # Then
        task = scheduler._task
        assert calls > 1
        assert not task.done()
        await scheduler.stop()
        assert task.cancelled()
