"""
차량번호·휴대폰 번호 등록 폼 컨트롤러. 입력 검증 실패 시 요청 없이 안내 문구 반환,
성공 시 서버 반영 후 세션 갱신. 삭제는 확인 단계를 거친다.
"""

import logging
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel

from app.client import auth
from app.client.context import ClientContext
from app.client.session import UserSession
from app.client.updates import PhoneUpdate, ProfileUpdate, StatusUpdate, VehicleUpdate
from app.core.errors import ProfileError
from app.core.validators import (
    format_phone_number,
    normalize_vehicle,
    validate_phone,
    validate_vehicle,
)

logger = logging.getLogger(__name__)

MSG_VEHICLE_INVALID = "차량번호 형식이 올바르지 않습니다. (예: 123가1234)"
MSG_PHONE_INVALID = "휴대폰 번호 형식이 올바르지 않습니다. (예: 010-1234-5678)"
MSG_VEHICLE_REGISTERED = "차량번호가 등록되었습니다."
MSG_PHONE_REGISTERED = "휴대폰 번호가 등록되었습니다."
MSG_VEHICLE_DELETE_CONFIRM = "등록된 차량번호를 삭제하시겠습니까?"
MSG_PHONE_DELETE_CONFIRM = "등록된 휴대폰 번호를 삭제하시겠습니까?"
MSG_VEHICLE_DELETED = "차량번호가 삭제되었습니다."
MSG_PHONE_DELETED = "휴대폰 번호가 삭제되었습니다."
MSG_DELETE_CANCELLED = "삭제가 취소되었습니다."
MSG_STATUS_UPDATED = "상태가 변경되었습니다."
MSG_LOGIN_REQUIRED = "로그인이 필요합니다."
MSG_REQUEST_FAILED = "요청 처리 중 오류가 발생했습니다. 잠시 후 다시 시도해 주세요."


class FieldView(BaseModel):
    """등록된 값이 있으면 display, 없으면 edit(입력 폼) 상태."""

    mode: Literal["display", "edit"]
    value: str | None = None


class RegistrationView(BaseModel):
    vehicle: FieldView
    phone: FieldView


class FormResult(BaseModel):
    ok: bool
    message: str
    view: RegistrationView | None = None


def _field_view(value: str | None) -> FieldView:
    if value:
        return FieldView(mode="display", value=value)
    return FieldView(mode="edit")


def build_view(user: UserSession) -> RegistrationView:
    return RegistrationView(
        vehicle=_field_view(user.vehicle_number),
        phone=_field_view(user.phone_number),
    )


def console_confirm(prompt: str) -> bool:
    """모달이 없을 때 쓰는 블로킹 확인 프롬프트."""
    answer = input(f"{prompt} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


class RegistrationForm:
    """대시보드 등록 폼. confirm은 삭제 확인 모달(없으면 console_confirm)."""

    def __init__(
        self,
        ctx: ClientContext,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.ctx = ctx
        self.confirm = confirm or console_confirm

    def view(self) -> RegistrationView | None:
        """세션 유저 기준 화면 상태. 세션 없으면 None."""
        user = auth.current_user(self.ctx)
        if user is None:
            return None
        return build_view(user)

    @staticmethod
    def format_phone_input(raw: str) -> str:
        """입력 중 자동 포맷(대시 삽입)."""
        return format_phone_number(raw)

    async def register_vehicle(self, raw: str) -> FormResult:
        value = normalize_vehicle(raw.strip())
        if not validate_vehicle(value):
            return FormResult(ok=False, message=MSG_VEHICLE_INVALID)
        return await self._submit(VehicleUpdate(vehicle_number=value), MSG_VEHICLE_REGISTERED)

    async def register_phone(self, raw: str) -> FormResult:
        value = format_phone_number(raw.strip())
        if not validate_phone(value):
            return FormResult(ok=False, message=MSG_PHONE_INVALID)
        return await self._submit(PhoneUpdate(phone_number=value), MSG_PHONE_REGISTERED)

    async def delete_vehicle(self) -> FormResult:
        if not self.confirm(MSG_VEHICLE_DELETE_CONFIRM):
            return FormResult(ok=False, message=MSG_DELETE_CANCELLED, view=self.view())
        return await self._submit(VehicleUpdate(vehicle_number=None), MSG_VEHICLE_DELETED)

    async def delete_phone(self) -> FormResult:
        if not self.confirm(MSG_PHONE_DELETE_CONFIRM):
            return FormResult(ok=False, message=MSG_DELETE_CANCELLED, view=self.view())
        return await self._submit(PhoneUpdate(phone_number=None), MSG_PHONE_DELETED)

    async def update_status(self, **fields: str | None) -> FormResult:
        """status_key / status_message 중 넘긴 키만 전송. 그 외 키는 ValidationError."""
        return await self._submit(StatusUpdate(**fields), MSG_STATUS_UPDATED)

    async def _submit(self, update: ProfileUpdate, success_message: str) -> FormResult:
        try:
            user = await auth.update_user(self.ctx, update)
        except auth.LoginRequiredError:
            return FormResult(ok=False, message=MSG_LOGIN_REQUIRED)
        except ProfileError as e:
            logger.error("Profile update (%s) failed: %s", update.kind, e)
            return FormResult(ok=False, message=MSG_REQUEST_FAILED, view=self.view())
        return FormResult(ok=True, message=success_message, view=build_view(user))
