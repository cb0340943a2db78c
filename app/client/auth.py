"""
클라이언트 로그인 흐름. Apple/Naver/Kakao(및 개발용 Google)는 모의 로그인,
Google 액세스 토큰이 있으면 userinfo만 읽어 로그인(토큰 서명 검증 없음).
"""

import asyncio
import logging
import random

import httpx

from app.client.context import ClientContext
from app.client.session import UserSession
from app.client.updates import ProfileUpdate
from app.core.errors import InternalError, InvalidInputError, ProfileError
from app.schemas.user import LoginRequest

logger = logging.getLogger(__name__)

# 모의 로그인 계정
MOCK_USERS: dict[str, LoginRequest] = {
    "google": LoginRequest(name="Google User", email="google@example.com", provider="Google"),
    "apple": LoginRequest(name="Apple User", email="user@icloud.com", provider="Apple"),
    "naver": LoginRequest(name="네이버 회원", email="naver@example.com", provider="Naver"),
    "kakao": LoginRequest(name="카카오 회원", email="kakao@example.com", provider="Kakao"),
}


class LoginRequiredError(ProfileError):
    """세션 없음. 보호된 화면 진입 시 로그인 화면으로 돌려보내는 용도."""

    status_code = 401

    def __init__(self, message: str = "Login required") -> None:
        super().__init__(message)


async def login(ctx: ClientContext, provider: str) -> UserSession:
    """모의 로그인. 네트워크 지연을 흉내 낸 뒤 서버에 find-or-create, 결과를 세션에 저장."""
    logger.info("Attempting login with %s...", provider)
    mock_user = MOCK_USERS.get(provider.strip().lower())
    if mock_user is None:
        raise InvalidInputError(f"Login failed: Unknown provider {provider!r}")

    delay = random.uniform(
        ctx.settings.mock_login_min_delay_sec, ctx.settings.mock_login_max_delay_sec
    )
    if delay > 0:
        await asyncio.sleep(delay)

    user = await ctx.api.login(mock_user)
    ctx.store.set(user)
    return user


async def login_with_google_token(ctx: ClientContext, access_token: str) -> UserSession:
    """Google userinfo 조회 → {email, name, provider=Google, avatar=picture}로 로그인."""
    try:
        resp = await ctx.http_client.get(
            ctx.settings.google_userinfo_url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
    except httpx.HTTPError as e:
        logger.warning("Google userinfo network error: %s", e, exc_info=True)
        raise InternalError("Google login temporarily unavailable") from e
    if resp.status_code != 200:
        logger.warning("Google userinfo failed: %s %s", resp.status_code, resp.text)
        raise InvalidInputError("Invalid or expired Google access token")

    try:
        data = resp.json()
    except ValueError as e:
        raise InternalError("Invalid Google userinfo response") from e
    if not isinstance(data, dict):
        raise InternalError("Invalid Google userinfo response")
    payload = LoginRequest(
        email=data.get("email"),
        name=data.get("name"),
        provider="Google",
        avatar=data.get("picture"),
    )
    user = await ctx.api.login(payload)
    ctx.store.set(user)
    return user


def logout(ctx: ClientContext) -> None:
    ctx.store.clear()


def current_user(ctx: ClientContext) -> UserSession | None:
    return ctx.store.get()


def is_logged_in(ctx: ClientContext) -> bool:
    return ctx.store.get() is not None


def require_login(ctx: ClientContext) -> UserSession:
    """보호된 화면용. 세션 없으면 LoginRequiredError."""
    user = ctx.store.get()
    if user is None:
        raise LoginRequiredError()
    return user


async def refresh_session(ctx: ClientContext) -> UserSession:
    """서버의 최신 row로 세션 교체."""
    user = require_login(ctx)
    fresh = await ctx.api.get_user(user.email)
    ctx.store.set(fresh)
    return fresh


async def update_user(ctx: ClientContext, update: ProfileUpdate) -> UserSession:
    """세션 유저에 변경 요청 적용, 응답 row로 세션 교체."""
    user = require_login(ctx)
    updated = await ctx.api.apply_update(user.email, update)
    ctx.store.set(updated)
    return updated
