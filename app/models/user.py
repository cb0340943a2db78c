"""User 모델. email 단일 키, 소셜 로그인 제공자 + 연락처(차량/휴대폰) + 상태."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base

DEFAULT_STATUS_KEY = "available"


class User(Base):
    """유저 프로필 1건. 로그인 시 생성되고 앱에서 삭제하지 않음."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    provider: Mapped[str] = mapped_column(String(32), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # 형식 검증을 통과한 값 또는 NULL
    vehicle_number: Mapped[str | None] = mapped_column(String(16), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(16), nullable=True)

    status_key: Mapped[str] = mapped_column(
        String(64), nullable=False, default=DEFAULT_STATUS_KEY
    )
    status_message: Mapped[str | None] = mapped_column(String(256), nullable=True)

    login_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
