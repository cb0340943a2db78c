"""Alembic 환경. 마이그레이션은 동기 드라이버 사용: PostgreSQL은 psycopg(psycopg3), SQLite는 내장 pysqlite."""

import os
# PostgreSQL 클라이언트 인코딩 강제 (서버 응답 UTF-8 디코딩)
os.environ.setdefault("PGCLIENTENCODING", "UTF8")

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url

from app.core.config import settings
from app.models import Base

# Alembic Config
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _to_sync_url(url: str) -> str:
    """앱용 비동기 URL → 마이그레이션용 동기 URL. asyncpg → psycopg, aiosqlite → pysqlite."""
    parsed = make_url(url)
    backend = parsed.get_backend_name()
    if backend == "postgresql":
        parsed = parsed.set(drivername="postgresql+psycopg")
    elif backend == "sqlite":
        parsed = parsed.set(drivername="sqlite")
    return parsed.render_as_string(hide_password=False)


def get_url() -> str:
    """마이그레이션용 DB URL. DATABASE_URL 필수."""
    url = settings.database_url
    if not url:
        raise ValueError("DATABASE_URL not set. Set it in .env or environment.")
    url = url.strip()
    # 공백·줄바꿈 검사 (터미널 출력이 .env에 붙어넣어졌을 때)
    for s in (" ", "\n", "\r"):
        if s in url:
            raise ValueError(
                "DATABASE_URL contains whitespace. Check .env: DATABASE_URL must be on a single line, "
                "e.g. sqlite+aiosqlite:///./database.sqlite"
            )
    return url


def run_migrations_offline() -> None:
    """오프라인 모드: SQL 스크립트 생성."""
    context.configure(
        url=_to_sync_url(get_url()),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """온라인 모드: 동기 엔진으로 실행. 앱 런타임(비동기 엔진)과 분리됨."""
    connectable = create_engine(_to_sync_url(get_url()), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
