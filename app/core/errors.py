"""프로필 서비스 예외 계층. main의 exception handler가 {"error": message}로 변환."""


class ProfileError(Exception):
    """서비스·클라이언트 공통 베이스. status_code는 HTTP 응답 코드."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(ProfileError):
    """형식 오류·필수 필드 누락 (400)."""

    status_code = 400


class UserNotFoundError(ProfileError):
    """email에 해당하는 row 없음 (404)."""

    status_code = 404

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class InternalError(ProfileError):
    """저장소·네트워크 실패 (500)."""

    status_code = 500


def error_for_status(status_code: int, message: str) -> ProfileError:
    """HTTP 상태 코드 → 예외 인스턴스. 클라이언트가 응답을 다시 예외로 올릴 때 사용."""
    if status_code == 400:
        return InvalidInputError(message)
    if status_code == 404:
        return UserNotFoundError(message)
    return InternalError(message)
