"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션 상태를 확인하고 필요하면 head까지 올립니다.
"""

from pathlib import Path
from typing import Optional, TypedDict

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from alembic.util.exc import CommandError
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class MigrationStatus(TypedDict):
    current: Optional[str]
    head: Optional[str]
    is_up_to_date: bool


def get_sync_database_url() -> str:
    """Alembic용 동기 드라이버 URL (asyncpg → psycopg2)"""
    return settings.database_url.replace(
        "postgresql+asyncpg", "postgresql+psycopg2"
    )


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", get_sync_database_url())
    config.attributes["configure_logger"] = False
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회"""
    engine = create_engine(get_sync_database_url())
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> MigrationStatus:
    """마이그레이션 상태 확인"""
    current = get_current_revision()
    head = get_head_revision()
    return MigrationStatus(
        current=current, head=head, is_up_to_date=current == head
    )


def run_migrations() -> None:
    """head까지 마이그레이션 실행"""
    command.upgrade(get_alembic_config(), "head")


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인

    Raises:
        RuntimeError: 프로덕션 환경에서 확인 또는 실행에 실패한 경우
    """
    try:
        status = check_migration_status()

        if status["is_up_to_date"]:
            logger.info(
                "Migrations up to date", extra={"revision": status["current"]}
            )
            return

        logger.warning(
            "Migrations pending",
            extra={"current": status["current"], "head": status["head"]},
        )
        if auto_migrate:
            run_migrations()
            logger.info("Migrations applied", extra={"revision": status["head"]})

    except (SQLAlchemyError, CommandError) as e:
        logger.error("Migration check failed", extra={"error": str(e)})
        # 개발 환경에서는 DB 없이도 서버를 띄울 수 있도록 계속 진행
        if settings.is_production:
            raise RuntimeError("Migration check failed in production") from e
        logger.warning("Continuing startup without migrations")
