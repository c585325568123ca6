"""Application Exceptions."""

from apps.skyparty.application.common.exceptions.auth import (
    InvalidCredentialsError,
    InvalidUserIdFormatError,
    MissingUserIdError,
    UnauthorizedInternalCallError,
)
from apps.skyparty.application.common.exceptions.base import (
    ApplicationError,
    ValidationError,
)
from apps.skyparty.application.common.exceptions.character import CharacterNotFoundError
from apps.skyparty.application.common.exceptions.gift import (
    GiftNotFoundError,
    InvalidPartyError,
)
from apps.skyparty.application.common.exceptions.user import (
    DuplicateUserError,
    InvalidActivationCodeError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "CharacterNotFoundError",
    "DuplicateUserError",
    "GiftNotFoundError",
    "InvalidActivationCodeError",
    "InvalidCredentialsError",
    "InvalidPartyError",
    "InvalidUserIdFormatError",
    "MissingUserIdError",
    "UnauthorizedInternalCallError",
    "UserNotFoundError",
    "ValidationError",
]
