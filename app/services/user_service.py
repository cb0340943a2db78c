"""User Service. email로 row를 찾아 필드 하나(또는 상태 묶음)를 바꾸고 저장."""

import logging
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import transaction
from app.core.errors import InternalError, InvalidInputError, UserNotFoundError
from app.core.validators import normalize_vehicle, validate_phone, validate_vehicle
from app.models.user import User
from app.repositories import user_repository
from app.schemas.user import StatusRequest, UserResponse

logger = logging.getLogger(__name__)


async def get_user(email: str) -> UserResponse:
    """email로 조회. 없으면 UserNotFoundError."""
    try:
        async with transaction() as session:
            user = await user_repository.get_by_email(session, email)
            if user is None:
                raise UserNotFoundError()
            return UserResponse.model_validate(user)
    except SQLAlchemyError as e:
        logger.exception("Get user error for %s: %s", email, e)
        raise InternalError("Internal server error") from e


async def _modify_user(email: str, apply: Callable[[User], None]) -> UserResponse:
    """row 로드 → apply로 필드 대입 → 한 번 저장. 실패 시 transaction()이 rollback."""
    try:
        async with transaction() as session:
            user = await user_repository.get_by_email(session, email)
            if user is None:
                raise UserNotFoundError()
            apply(user)
            user = await user_repository.save(session, user)
            return UserResponse.model_validate(user)
    except SQLAlchemyError as e:
        logger.exception("Update user error for %s: %s", email, e)
        raise InternalError("Internal server error") from e


async def set_vehicle_number(email: str, vehicle_number: str | None) -> UserResponse:
    """차량번호 등록. 공백 제거 후 형식 검증, 실패 시 InvalidInputError."""
    if not vehicle_number or not validate_vehicle(vehicle_number):
        raise InvalidInputError("Invalid vehicle number format")
    value = normalize_vehicle(vehicle_number)

    def apply(user: User) -> None:
        user.vehicle_number = value

    return await _modify_user(email, apply)


async def clear_vehicle_number(email: str) -> UserResponse:
    def apply(user: User) -> None:
        user.vehicle_number = None

    return await _modify_user(email, apply)


async def set_phone_number(email: str, phone_number: str | None) -> UserResponse:
    """휴대폰 번호 등록. 010-XXX(X)-XXXX 형식만 허용."""
    if not phone_number or not validate_phone(phone_number.strip()):
        raise InvalidInputError("Invalid phone number format")
    value = phone_number.strip()

    def apply(user: User) -> None:
        user.phone_number = value

    return await _modify_user(email, apply)


async def clear_phone_number(email: str) -> UserResponse:
    def apply(user: User) -> None:
        user.phone_number = None

    return await _modify_user(email, apply)


async def update_status(email: str, payload: StatusRequest) -> UserResponse:
    """
    상태 변경. status_key는 비어 있지 않을 때만 덮어씀(지울 수 없음).
    status_message는 요청에 키가 있으면 빈 문자열이어도 덮어씀.
    """
    message_present = "status_message" in payload.model_fields_set

    def apply(user: User) -> None:
        if payload.status_key:
            user.status_key = payload.status_key
        if message_present:
            user.status_message = payload.status_message

    return await _modify_user(email, apply)
