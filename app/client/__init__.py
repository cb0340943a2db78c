# 프로필 서비스 클라이언트 (세션 캐시·입력 검증·변경 요청)
from app.client.context import ClientContext
from app.client.session import FileSessionStore, MemorySessionStore, UserSession
from app.client.updates import PhoneUpdate, StatusUpdate, VehicleUpdate

__all__ = [
    "ClientContext",
    "FileSessionStore",
    "MemorySessionStore",
    "PhoneUpdate",
    "StatusUpdate",
    "UserSession",
    "VehicleUpdate",
]
