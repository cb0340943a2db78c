"""Pytest fixtures. 인메모리 SQLite(aiosqlite)로 DB를 교체하고 ASGI 앱에 직접 요청."""

import os
from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

# 테스트에서는 lifespan(파일 DB 생성)을 타지 않음. 설정 로드 시 .env 영향 최소화.
os.environ["DATABASE_URL"] = ""
os.environ["DB_CREATE_ALL"] = "false"

from app.client.context import ClientContext
from app.client.session import MemorySessionStore
from app.core.config import Settings
from app.core.database import make_session_maker, override_db_for_testing
from app.main import app
from app.models import Base

TEST_BASE_URL = "http://test"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """테이블이 생성된 인메모리 SQLite 엔진. Holder에 주입 후 테스트 종료 시 해제."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    override_db_for_testing(engine, make_session_maker(engine))
    yield engine
    override_db_for_testing(None, None)
    await engine.dispose()


@pytest.fixture
def asgi_transport() -> httpx.ASGITransport:
    """앱 예외를 재발생시키지 않음(전역 핸들러의 500 응답을 검증하기 위해)."""
    return httpx.ASGITransport(app=app, raise_app_exceptions=False)


@pytest_asyncio.fixture
async def client(
    db_engine: AsyncEngine, asgi_transport: httpx.ASGITransport
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """서버 API 호출용 AsyncClient."""
    async with httpx.AsyncClient(transport=asgi_transport, base_url=TEST_BASE_URL) as c:
        yield c


@pytest.fixture
def client_settings() -> Settings:
    """모의 로그인 지연 0초."""
    return Settings(
        _env_file=None,
        database_url=None,
        api_base_url=TEST_BASE_URL,
        mock_login_min_delay_sec=0.0,
        mock_login_max_delay_sec=0.0,
    )


@pytest_asyncio.fixture
async def ctx(
    db_engine: AsyncEngine,
    asgi_transport: httpx.ASGITransport,
    client_settings: Settings,
) -> AsyncGenerator[ClientContext, None]:
    """실제 클라이언트 코드 → ASGI 앱 → 인메모리 DB. 세션은 메모리 저장소."""
    async with ClientContext.create(
        settings=client_settings,
        store=MemorySessionStore(),
        transport=asgi_transport,
    ) as context:
        yield context
