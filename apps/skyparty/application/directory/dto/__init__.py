"""Directory DTOs."""

from apps.skyparty.application.directory.dto.user import (
    ActivateUserRequest,
    LoginRequest,
    RegisterUserRequest,
    UserView,
)

__all__ = ["ActivateUserRequest", "LoginRequest", "RegisterUserRequest", "UserView"]
