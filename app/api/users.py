"""User API. email 경로 파라미터로 row 하나를 조회·부분 수정."""

from fastapi import APIRouter

from app.schemas.user import PhoneRequest, StatusRequest, UserResponse, VehicleRequest
from app.services import user_service

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/{email}", response_model=UserResponse)
async def get_user(email: str) -> UserResponse:
    """유저 조회. 없으면 404."""
    return await user_service.get_user(email)


@router.put("/{email}/vehicle", response_model=UserResponse)
async def put_vehicle(email: str, payload: VehicleRequest) -> UserResponse:
    return await user_service.set_vehicle_number(email, payload.vehicle_number)


@router.delete("/{email}/vehicle", response_model=UserResponse)
async def delete_vehicle(email: str) -> UserResponse:
    """차량번호 삭제. 응답의 vehicleNumber는 null."""
    return await user_service.clear_vehicle_number(email)


@router.put("/{email}/phone", response_model=UserResponse)
async def put_phone(email: str, payload: PhoneRequest) -> UserResponse:
    return await user_service.set_phone_number(email, payload.phone_number)


@router.delete("/{email}/phone", response_model=UserResponse)
async def delete_phone(email: str) -> UserResponse:
    """휴대폰 번호 삭제. 응답의 phoneNumber는 null."""
    return await user_service.clear_phone_number(email)


@router.put("/{email}/status", response_model=UserResponse)
async def put_status(email: str, payload: StatusRequest) -> UserResponse:
    """상태 변경. statusKey는 비어 있지 않을 때만, statusMessage는 키가 있으면 반영."""
    return await user_service.update_status(email, payload)
