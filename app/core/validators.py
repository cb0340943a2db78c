"""차량번호·휴대폰 번호 포맷/검증. 클라이언트 폼과 서버 PUT 핸들러가 같이 사용."""

import re

# 2~3자리 숫자 + 한글 한 글자 + 4자리 숫자 (예: 12가1234, 123가1234)
VEHICLE_PATTERN = re.compile(r"[0-9]{2,3}[가-힣][0-9]{4}")
# 010-XXX-XXXX 또는 010-XXXX-XXXX
PHONE_PATTERN = re.compile(r"010-[0-9]{3,4}-[0-9]{4}")

_NON_DIGIT = re.compile(r"[^0-9]")
_WHITESPACE = re.compile(r"\s")


def format_phone_number(value: str) -> str:
    """
    입력 중인 휴대폰 번호에 대시 삽입. 숫자 외 문자는 제거.
    10자리는 3-3-4, 그 외 8자리 이상은 3-4-나머지. 11자리 초과분은 잘라내지 않음
    (잘라내면 잘못된 입력이 유효한 번호로 바뀜).
    """
    digits = _NON_DIGIT.sub("", value)
    if len(digits) <= 3:
        return digits
    if len(digits) <= 7:
        return f"{digits[:3]}-{digits[3:]}"
    if len(digits) == 10:
        return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
    return f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"


def normalize_vehicle(value: str) -> str:
    """차량번호에서 공백 제거."""
    return _WHITESPACE.sub("", value)


def validate_vehicle(value: str) -> bool:
    return VEHICLE_PATTERN.fullmatch(normalize_vehicle(value)) is not None


def validate_phone(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None
