"""User application exceptions."""

from __future__ import annotations

from apps.skyparty.application.common.exceptions.base import ApplicationError


class UserNotFoundError(ApplicationError):
    """사용자를 찾을 수 없을 때 발생하는 예외."""

    def __init__(self) -> None:
        super().__init__("User not found")


class DuplicateUserError(ApplicationError):
    """username 또는 email 중복."""

    def __init__(self, field: str) -> None:
        self.field = field
        message = "Username already taken" if field == "username" else "User already exists"
        super().__init__(message)


class InvalidActivationCodeError(ApplicationError):
    """등록되지 않은 활성화 코드."""

    def __init__(self) -> None:
        super().__init__("Invalid activation code")
