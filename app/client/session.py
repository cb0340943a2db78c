"""클라이언트 세션 저장소. 로그인한 유저 row 하나를 고정 키(auth_user)에 보관."""

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)

SESSION_KEY = "auth_user"


class UserSession(UserResponse):
    """클라이언트에 캐시된 유저. 서버 row와 같은 필드."""


class SessionStore(Protocol):
    def get(self) -> UserSession | None: ...

    def set(self, user: UserSession) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    """프로세스 메모리 저장소. 테스트·임베딩용."""

    def __init__(self, user: UserSession | None = None) -> None:
        self._user = user

    def get(self) -> UserSession | None:
        return self._user

    def set(self, user: UserSession) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None


class FileSessionStore:
    """
    JSON 파일 저장소. {"auth_user": {...}} 한 문서만 유지.
    파일이 깨졌거나 형식이 다르면 세션 없음으로 취급.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Unreadable session file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> UserSession | None:
        raw = self._read().get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return UserSession.model_validate(raw)
        except ValidationError as e:
            logger.warning("Discarding malformed session in %s: %s", self.path, e)
            return None

    def set(self, user: UserSession) -> None:
        data = self._read()
        data[SESSION_KEY] = user.model_dump(mode="json", by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def clear(self) -> None:
        data = self._read()
        if SESSION_KEY not in data:
            return
        del data[SESSION_KEY]
        if data:
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        else:
            self.path.unlink(missing_ok=True)
