"""Health 엔드포인트 테스트."""

import httpx
import pytest

from app.core.database import get_async_session_maker
from app.main import app


@pytest.mark.asyncio
async def test_health_ok_with_db(client: httpx.AsyncClient) -> None:
    """GET /health → DB 연결 시 status=ok, db=ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "db": "ok"}


@pytest.mark.asyncio
async def test_health_degraded_without_db() -> None:
    """DB 미초기화 시 200 + degraded."""
    assert get_async_session_maker() is None
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        response = await c.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "db": "error"}
