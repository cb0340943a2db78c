"""User Repository. DB 쿼리만 수행."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import DEFAULT_STATUS_KEY, User


async def get_by_email(session: AsyncSession, email: str) -> User | None:
    """email로 유저 조회."""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalars().one_or_none()


async def list_all(session: AsyncSession) -> list[User]:
    """전체 유저 (id 순). 점검 스크립트용."""
    result = await session.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def create(
    session: AsyncSession,
    *,
    email: str,
    name: str,
    provider: str,
    avatar: str | None,
    login_time: datetime,
) -> User:
    """신규 유저 INSERT 후 DB 값으로 다시 로드. 상태는 기본값(available)."""
    user = User(
        email=email,
        name=name,
        provider=provider,
        avatar=avatar,
        status_key=DEFAULT_STATUS_KEY,
        login_time=login_time,
    )
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def save(session: AsyncSession, user: User) -> User:
    """변경된 속성 flush 후 DB 값(updated_at 등)으로 갱신."""
    await session.flush()
    await session.refresh(user)
    return user
