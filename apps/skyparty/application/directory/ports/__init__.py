"""Directory Ports."""

from apps.skyparty.application.directory.ports.password_hasher import PasswordHasher
from apps.skyparty.application.directory.ports.user_gateway import (
    UserCommandGateway,
    UserQueryGateway,
)

__all__ = ["PasswordHasher", "UserCommandGateway", "UserQueryGateway"]
