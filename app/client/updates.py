"""
프로필 변경 요청 타입. 호출 측에서 어떤 필드 묶음을 바꿀지 먼저 정하고,
resolve()로 (HTTP 메서드, 경로, 본문)을 확정한 뒤 네트워크 호출.
"""

from typing import Annotated, Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResolvedRequest(NamedTuple):
    method: str
    path: str  # /api/user/{email} 뒤에 붙는 경로
    body: dict[str, Any] | None


class _Update(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid"
    )


class VehicleUpdate(_Update):
    """차량번호 등록(값) 또는 삭제(None)."""

    kind: Literal["vehicle"] = "vehicle"
    vehicle_number: str | None

    def resolve(self) -> ResolvedRequest:
        if self.vehicle_number is None:
            return ResolvedRequest("DELETE", "/vehicle", None)
        return ResolvedRequest("PUT", "/vehicle", {"vehicleNumber": self.vehicle_number})


class PhoneUpdate(_Update):
    """휴대폰 번호 등록(값) 또는 삭제(None)."""

    kind: Literal["phone"] = "phone"
    phone_number: str | None

    def resolve(self) -> ResolvedRequest:
        if self.phone_number is None:
            return ResolvedRequest("DELETE", "/phone", None)
        return ResolvedRequest("PUT", "/phone", {"phoneNumber": self.phone_number})


class StatusUpdate(_Update):
    """상태 변경. 생성 시 명시한 필드만 전송(status_message=""는 메시지 지우기)."""

    kind: Literal["status"] = "status"
    status_key: str | None = None
    status_message: str | None = None

    def resolve(self) -> ResolvedRequest:
        body = self.model_dump(by_alias=True, exclude_unset=True, exclude={"kind"})
        return ResolvedRequest("PUT", "/status", body)


ProfileUpdate = Annotated[
    VehicleUpdate | PhoneUpdate | StatusUpdate,
    Field(discriminator="kind"),
]
