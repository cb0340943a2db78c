"""Auth API. 소셜 로그인 후 User find-or-create."""

from fastapi import APIRouter

from app.schemas.user import LoginRequest, UserResponse
from app.services.auth_service import login_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserResponse)
async def post_login(payload: LoginRequest) -> UserResponse:
    """
    로그인 / 회원 생성. email 기준으로 없으면 생성, 있으면 name·avatar·loginTime 갱신.
    email 누락 시 400.
    """
    return await login_user(payload)
