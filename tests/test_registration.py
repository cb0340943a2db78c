"""등록 폼 컨트롤러 테스트. 검증 실패 시 요청 없음, 삭제는 확인 단계 필요."""

from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from app.client import auth
from app.client.context import ClientContext
from app.client.registration import (
    MSG_DELETE_CANCELLED,
    MSG_LOGIN_REQUIRED,
    MSG_PHONE_INVALID,
    MSG_PHONE_REGISTERED,
    MSG_REQUEST_FAILED,
    MSG_STATUS_UPDATED,
    MSG_VEHICLE_DELETED,
    MSG_VEHICLE_INVALID,
    MSG_VEHICLE_REGISTERED,
    FieldView,
    RegistrationForm,
    console_confirm,
)
from app.core.errors import InternalError


@pytest.mark.asyncio
async def test_view_without_session_is_none(ctx: ClientContext) -> None:
    assert RegistrationForm(ctx).view() is None


@pytest.mark.asyncio
async def test_fresh_user_sees_edit_forms(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    view = RegistrationForm(ctx).view()
    assert view.vehicle == FieldView(mode="edit")
    assert view.phone == FieldView(mode="edit")


@pytest.mark.asyncio
async def test_invalid_vehicle_blocks_submission(ctx: ClientContext) -> None:
    """형식 오류 → 안내 문구, API 호출 없음."""
    await auth.login(ctx, "kakao")
    form = RegistrationForm(ctx)
    with patch.object(ctx.api, "apply_update", new=AsyncMock()) as apply_update:
        result = await form.register_vehicle("1234가1234")
    assert result.ok is False
    assert result.message == MSG_VEHICLE_INVALID
    apply_update.assert_not_awaited()


@pytest.mark.asyncio
async def test_register_vehicle_switches_to_display(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    result = await RegistrationForm(ctx).register_vehicle(" 123 가 4567 ")
    assert result.ok is True
    assert result.message == MSG_VEHICLE_REGISTERED
    assert result.view.vehicle == FieldView(mode="display", value="123가4567")
    assert auth.current_user(ctx).vehicle_number == "123가4567"
    assert (await ctx.api.get_user("kakao@example.com")).vehicle_number == "123가4567"


@pytest.mark.asyncio
async def test_register_phone_formats_digits(ctx: ClientContext) -> None:
    """숫자만 입력해도 자동 포맷 후 검증."""
    await auth.login(ctx, "kakao")
    result = await RegistrationForm(ctx).register_phone("01012345678")
    assert result.ok is True
    assert result.message == MSG_PHONE_REGISTERED
    assert result.view.phone == FieldView(mode="display", value="010-1234-5678")


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["0101234567890", "011-1234-5678", "010-12"])
async def test_invalid_phone_blocks_submission(ctx: ClientContext, raw: str) -> None:
    await auth.login(ctx, "kakao")
    result = await RegistrationForm(ctx).register_phone(raw)
    assert result.ok is False
    assert result.message == MSG_PHONE_INVALID
    assert auth.current_user(ctx).phone_number is None


def test_format_phone_input_live() -> None:
    assert RegistrationForm.format_phone_input("0101234") == "010-1234"


@pytest.mark.asyncio
async def test_delete_declined_keeps_value(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    prompts: list[str] = []

    def decline(prompt: str) -> bool:
        prompts.append(prompt)
        return False

    form = RegistrationForm(ctx, confirm=decline)
    await form.register_vehicle("12가1234")
    result = await form.delete_vehicle()
    assert len(prompts) == 1
    assert result.ok is False
    assert result.message == MSG_DELETE_CANCELLED
    assert result.view.vehicle.mode == "display"
    assert (await ctx.api.get_user("kakao@example.com")).vehicle_number == "12가1234"


@pytest.mark.asyncio
async def test_delete_confirmed_clears_value(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    form = RegistrationForm(ctx, confirm=lambda prompt: True)
    await form.register_vehicle("12가1234")
    await form.register_phone("010-123-4567")

    result = await form.delete_vehicle()
    assert result.ok is True
    assert result.message == MSG_VEHICLE_DELETED
    assert result.view.vehicle == FieldView(mode="edit")
    assert result.view.phone.mode == "display"

    result = await form.delete_phone()
    assert result.ok is True
    assert result.view.phone == FieldView(mode="edit")


@pytest.mark.asyncio
async def test_delete_falls_back_to_console_prompt(
    ctx: ClientContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    """confirm 미지정 시 input() 기반 확인."""
    await auth.login(ctx, "kakao")
    monkeypatch.setattr("builtins.input", lambda prompt: "y")
    form = RegistrationForm(ctx)
    await form.register_phone("010-1234-5678")
    result = await form.delete_phone()
    assert result.ok is True
    assert auth.current_user(ctx).phone_number is None


@pytest.mark.parametrize(("answer", "expected"), [("y", True), ("YES", True), ("", False), ("n", False)])
def test_console_confirm(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: answer)
    assert console_confirm("삭제하시겠습니까?") is expected


@pytest.mark.asyncio
async def test_update_status_message_only(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    form = RegistrationForm(ctx)
    await form.update_status(status_key="meeting", status_message="회의 중")
    result = await form.update_status(status_message="")
    assert result.ok is True
    assert result.message == MSG_STATUS_UPDATED
    user = auth.current_user(ctx)
    assert user.status_key == "meeting"
    assert user.status_message == ""


@pytest.mark.asyncio
async def test_submit_without_session(ctx: ClientContext) -> None:
    result = await RegistrationForm(ctx).register_vehicle("12가1234")
    assert result.ok is False
    assert result.message == MSG_LOGIN_REQUIRED


@pytest.mark.asyncio
async def test_service_failure_reports_generic_message(ctx: ClientContext) -> None:
    await auth.login(ctx, "kakao")
    form = RegistrationForm(ctx)
    with patch.object(
        ctx.api, "apply_update", new=AsyncMock(side_effect=InternalError("Internal server error"))
    ):
        result = await form.register_vehicle("12가1234")
    assert result.ok is False
    assert result.message == MSG_REQUEST_FAILED
    assert result.view.vehicle.mode == "edit"
    assert auth.current_user(ctx).vehicle_number is None


@pytest.mark.asyncio
async def test_update_status_unknown_field_raises(ctx: ClientContext) -> None:
    """오타 키는 요청 없이 ValidationError (성공 문구 반환 안 함)."""
    await auth.login(ctx, "kakao")
    form = RegistrationForm(ctx)
    with patch.object(ctx.api, "apply_update", new=AsyncMock()) as apply_update:
        with pytest.raises(ValidationError):
            await form.update_status(status_msg="x")
    apply_update.assert_not_awaited()
