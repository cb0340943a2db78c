"""FastAPI 앱 진입점. app.main:app"""

import asyncio
import logging
from contextlib import asynccontextmanager

from app.core.config import settings

# 환경 변수 로드 직후 Sentry 초기화. 임포트/라우터 등록 단계 예외도 수집.
def _init_sentry() -> None:
    """SENTRY_DSN이 있으면 Sentry 초기화. environment는 설정에서 로드."""
    if settings.sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn.get_secret_value(),
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=0.1,
            environment=settings.environment,
        )


_init_sentry()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import auth, health, users
from app.core.database import create_tables, get_engine, init_db, verify_db_connection
from app.core.errors import ProfileError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 수명 주기: DB 엔진 생성·연결 검증·(설정 시) 테이블 생성, 종료 시 dispose."""
    init_db()
    await verify_db_connection()
    if settings.db_create_all:
        await create_tables()
    yield
    eng = get_engine()
    if eng is not None:
        await eng.dispose()


app = FastAPI(
    title="Profile API",
    description="소셜 로그인 유저 프로필(차량번호·연락처·상태) 백엔드",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")

allowed_origins = [
    o.strip() for o in settings.allowed_origins.split(",") if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials="*" not in allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ProfileError)
async def profile_error_handler(request: Request, exc: ProfileError) -> JSONResponse:
    """서비스 예외 → {"error": message}. 500은 서비스에서 이미 로그 남김."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """라우트 없음(404)·허용되지 않은 메서드(405) 등 → {"error": detail}. Allow 등 헤더 유지."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """본문 JSON 파싱·타입 오류 → 400. 첫 번째 오류 메시지만 노출."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"error": message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """미처리 예외 → 500 + 로그."""
    if isinstance(exc, asyncio.CancelledError):
        raise exc  # 정상 연결 종료, 500 로그 방지
    logger.exception("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )
