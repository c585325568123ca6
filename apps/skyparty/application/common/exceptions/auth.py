"""인증 관련 예외."""

from __future__ import annotations

from apps.skyparty.application.common.exceptions.base import ApplicationError


class MissingUserIdError(ApplicationError):
    """사용자 ID가 누락됨."""

    def __init__(self) -> None:
        super().__init__("Missing user ID")


class InvalidUserIdFormatError(ApplicationError):
    """유효하지 않은 사용자 ID 형식."""

    def __init__(self) -> None:
        super().__init__("Invalid user ID format")


class InvalidCredentialsError(ApplicationError):
    """email 또는 비밀번호 불일치.

    어느 쪽이 틀렸는지 구분하지 않습니다.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class UnauthorizedInternalCallError(ApplicationError):
    """내부 API 토큰 누락 또는 불일치."""

    def __init__(self) -> None:
        super().__init__("Internal API token required")
