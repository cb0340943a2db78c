"""프로필 API HTTP 클라이언트. httpx.AsyncClient 하나를 받아 사용(컨텍스트가 수명 관리)."""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.client.session import UserSession
from app.client.updates import ProfileUpdate
from app.core.errors import InternalError, error_for_status
from app.schemas.user import LoginRequest

logger = logging.getLogger(__name__)


def user_path(email: str) -> str:
    return f"/api/user/{quote(email, safe='@')}"


class ProfileApiClient:
    """서버 응답(row 전체)을 UserSession으로 변환. 2xx 외 응답은 ProfileError 계열로 올림."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def login(self, payload: LoginRequest) -> UserSession:
        return await self._request(
            "POST",
            "/api/auth/login",
            payload.model_dump(by_alias=True),
        )

    async def get_user(self, email: str) -> UserSession:
        return await self._request("GET", user_path(email))

    async def apply_update(self, email: str, update: ProfileUpdate) -> UserSession:
        req = update.resolve()
        return await self._request(req.method, user_path(email) + req.path, req.body)

    async def _request(
        self, method: str, url: str, body: dict | None = None
    ) -> UserSession:
        try:
            resp = await self.http_client.request(method, url, json=body)
        except httpx.HTTPError as e:
            logger.warning("Profile API %s %s network error: %s", method, url, e, exc_info=True)
            raise InternalError("Profile API temporarily unavailable") from e

        if resp.status_code != 200:
            message = _error_message(resp)
            logger.warning("Profile API %s %s failed: %s %s", method, url, resp.status_code, message)
            raise error_for_status(resp.status_code, message)

        try:
            return UserSession.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise InternalError("Invalid profile API response") from e


def _error_message(resp: httpx.Response) -> str:
    """{"error": "..."} 본문에서 메시지 추출. 없으면 상태 문구."""
    try:
        data = resp.json()
    except ValueError:
        return resp.reason_phrase or "Request failed"
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return resp.reason_phrase or "Request failed"
