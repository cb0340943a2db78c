"""클라이언트 컨텍스트. 세션 저장소·API 클라이언트·설정을 묶어 각 동작에 명시적으로 전달."""

from __future__ import annotations

import httpx

from app.client.api import ProfileApiClient
from app.client.session import FileSessionStore, SessionStore
from app.core.config import Settings, settings as default_settings


class ClientContext:
    """
    Usage::

        async with ClientContext.create() as ctx:
            user = await auth.login(ctx, "kakao")
    """

    def __init__(
        self,
        api: ProfileApiClient,
        store: SessionStore,
        settings: Settings | None = None,
    ) -> None:
        self.api = api
        self.store = store
        self.settings = settings or default_settings

    @classmethod
    def create(
        cls,
        *,
        settings: Settings | None = None,
        store: SessionStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ClientContext:
        """설정 기반 생성. transport를 주면 ASGI 앱 등에 직접 연결."""
        cfg = settings or default_settings
        http_client = httpx.AsyncClient(
            base_url=cfg.api_base_url,
            timeout=cfg.http_timeout_sec,
            transport=transport,
        )
        return cls(
            api=ProfileApiClient(http_client),
            store=store or FileSessionStore(cfg.session_file),
            settings=cfg,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self.api.http_client

    async def aclose(self) -> None:
        await self.api.http_client.aclose()

    async def __aenter__(self) -> ClientContext:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
