"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ApplicationError):
    """필수 입력 누락 또는 형식 오류."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message)
