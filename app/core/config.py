"""환경 변수 기반 설정. pydantic-settings 사용."""

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """앱 설정. 환경변수에서 로드. 시크릿은 SecretStr로 마스킹."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 모니터링 (선택)
    sentry_dsn: SecretStr | None = None
    environment: str = "development"  # Sentry/로깅용. production, staging, development 등.
    log_level: str = "INFO"

    # DB. sqlite:// 는 aiosqlite, postgresql:// 는 asyncpg 드라이버로 변환.
    database_url: str | None = "sqlite+aiosqlite:///./database.sqlite"
    db_connect_retries: int = Field(5, ge=1, le=20)  # 연결 실패 시 재시도 횟수.
    db_connect_retry_interval_sec: float = Field(2.0, ge=0.5, le=60.0)  # 재시도 간격(초).
    # 부팅 시 테이블 생성(create_all). 운영 DB는 alembic upgrade 사용.
    db_create_all: bool = True

    # CORS. 쉼표 구분. "*" 이면 전체 허용.
    allowed_origins: str = "*"

    # 클라이언트 (app.client)
    api_base_url: str = "http://localhost:8000"
    session_file: str = ".session.json"
    google_userinfo_url: str = "https://www.googleapis.com/oauth2/v3/userinfo"
    http_timeout_sec: float = Field(10.0, ge=1.0, le=120.0)
    # 모의 로그인 네트워크 지연 범위(초).
    mock_login_min_delay_sec: float = Field(0.5, ge=0.0, le=10.0)
    mock_login_max_delay_sec: float = Field(1.5, ge=0.0, le=10.0)

    @model_validator(mode="after")
    def check_ranges(self: "Settings") -> "Settings":
        """모의 로그인 지연 범위 역전 방지."""
        if self.mock_login_min_delay_sec > self.mock_login_max_delay_sec:
            raise ValueError(
                "MOCK_LOGIN_MIN_DELAY_SEC must not exceed MOCK_LOGIN_MAX_DELAY_SEC"
            )
        return self

    @model_validator(mode="after")
    def fail_fast_production(self: "Settings") -> "Settings":
        """프로덕션 환경 시 DATABASE_URL 누락이면 부팅 거부(Fail-Fast)."""
        if (self.environment or "").strip().lower() != "production":
            return self
        if not (self.database_url or "").strip():
            raise ValueError(
                "Production environment requires DATABASE_URL to be set. "
                "Set it in Secret Manager or environment before boot."
            )
        return self


settings = Settings()
