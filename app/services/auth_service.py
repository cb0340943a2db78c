"""Auth Service. 소셜 로그인 결과로 User find-or-create. 토큰 검증은 하지 않음."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import transaction
from app.core.errors import InternalError, InvalidInputError
from app.repositories import user_repository
from app.schemas.user import LoginRequest, UserResponse

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


async def login_user(payload: LoginRequest) -> UserResponse:
    """
    email 기준 find-or-create.
    1. email 비어 있으면 InvalidInputError
    2. 없으면 생성(name·provider 필수, status_key=available, login_time=now)
    3. 있으면 name(값이 있을 때)·avatar·login_time만 갱신. 차량/휴대폰/상태는 유지
    """
    email = (payload.email or "").strip()
    if not email:
        raise InvalidInputError("Email is required")

    try:
        async with transaction() as session:
            now = _now()
            user = await user_repository.get_by_email(session, email)
            if user is None:
                if not payload.name or not payload.provider:
                    raise InvalidInputError("Name and provider are required for a new user")
                user = await user_repository.create(
                    session,
                    email=email,
                    name=payload.name,
                    provider=payload.provider,
                    avatar=payload.avatar,
                    login_time=now,
                )
                logger.info("Created user %s (%s)", email, payload.provider)
            else:
                if payload.name:
                    user.name = payload.name
                user.avatar = payload.avatar
                user.login_time = now
                user = await user_repository.save(session, user)
            return UserResponse.model_validate(user)
    except SQLAlchemyError as e:
        logger.exception("Login error for %s: %s", email, e)
        raise InternalError("Internal server error") from e
