"""테스트 설정"""

import base64
import json
import os
from typing import Any, AsyncGenerator, Generator, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.security import (
    RequestDecryptor,
    get_request_decryptor,
    get_token_verifier,
)
from app.main import app

# 모든 모델을 메타데이터에 등록
from app.domains.friends.models import Friendship  # noqa: F401
from app.domains.live_events.models import LiveEvent  # noqa: F401
from app.domains.places.models import PointOfInterest  # noqa: F401
from app.domains.recommendations.models import RecommendedPoi  # noqa: F401
from app.domains.users.models import User  # noqa: F401


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False


DOCKER_AVAILABLE = _is_docker_available()


# ---------------------------------------------------------------------------
# 데이터베이스 (PostgreSQL 테스트 컨테이너)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL (asyncpg)"""
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio는 테스트마다 독립적인 event loop를 생성하므로
# async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def db_session(test_database_url: str) -> AsyncGenerator[AsyncSession, None]:
    """테스트마다 스키마를 새로 만든 데이터베이스 세션"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()

    await engine.dispose()


# ---------------------------------------------------------------------------
# 요청 암호화 / 인증
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """테스트용 RSA 키 쌍"""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def encrypt_body(rsa_private_key):
    """dict를 클라이언트와 같은 방식(RSA PKCS#1 v1.5 + base64)으로 암호화"""

    def _encrypt(payload: Any) -> str:
        plaintext = (
            payload if isinstance(payload, str) else json.dumps(payload)
        ).encode("utf-8")
        ciphertext = rsa_private_key.public_key().encrypt(
            plaintext, padding.PKCS1v15()
        )
        return base64.b64encode(ciphertext).decode("ascii")

    return _encrypt


class FakeTokenVerifier:
    """'user:<이름>' 형식의 토큰만 유효한 것으로 보는 검증기"""

    async def verify(self, token: str) -> Optional[str]:
        if token.startswith("user:"):
            return token.removeprefix("user:")
        return None


@pytest.fixture
def auth_header():
    """사용자 이름으로 Bearer 헤더 생성"""

    def _header(username: str) -> dict[str, str]:
        return {"Authorization": f"Bearer user:{username}"}

    return _header


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


# ---------------------------------------------------------------------------
# API 클라이언트
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_db_session():
    """라우터 테스트용 Mock AsyncSession"""
    session = MagicMock(spec=AsyncSession)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest_asyncio.fixture
async def client(rsa_private_key, mock_db_session):
    """비동기 테스트 클라이언트

    DB 세션, 토큰 검증기, 요청 복호화기를 테스트용으로 교체합니다.
    서비스 의존성은 각 테스트에서 app.dependency_overrides로 교체합니다.
    """

    async def override_get_db():
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_verifier] = lambda: FakeTokenVerifier()
    app.dependency_overrides[get_request_decryptor] = lambda: RequestDecryptor(
        rsa_private_key
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    """anyio 백엔드 설정"""
    return "asyncio"
