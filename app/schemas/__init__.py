# Pydantic schemas
from app.schemas.user import (
    LoginRequest,
    PhoneRequest,
    StatusRequest,
    UserResponse,
    VehicleRequest,
)

__all__ = [
    "LoginRequest",
    "PhoneRequest",
    "StatusRequest",
    "UserResponse",
    "VehicleRequest",
]
