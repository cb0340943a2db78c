"""User 관련 Pydantic 스키마. JSON 키는 camelCase(vehicleNumber 등), 파이썬 필드는 snake_case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase alias 공통 설정. 필드명으로도 생성 가능."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    """로그인(find-or-create) 요청. email 누락은 서비스에서 400으로 처리."""

    email: str | None = None
    name: str | None = None
    provider: str | None = None
    avatar: str | None = None


class VehicleRequest(CamelModel):
    """차량번호 등록 요청."""

    vehicle_number: str | None = None


class PhoneRequest(CamelModel):
    """휴대폰 번호 등록 요청."""

    phone_number: str | None = None


class StatusRequest(CamelModel):
    """
    상태 변경 요청. status_key는 비어 있지 않을 때만 반영.
    status_message는 페이로드에 키가 있으면 빈 문자열·null이어도 반영(model_fields_set으로 판별).
    """

    status_key: str | None = Field(None, max_length=64)
    status_message: str | None = Field(None, max_length=256)


class UserResponse(CamelModel):
    """User 응답. row 전체."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    email: str
    name: str
    provider: str
    avatar: str | None = None
    vehicle_number: str | None = None
    phone_number: str | None = None
    status_key: str
    status_message: str | None = None
    login_time: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
