"""Directory Commands."""

from apps.skyparty.application.directory.commands.activate_user import ActivateUserCommand
from apps.skyparty.application.directory.commands.login_user import LoginCommand
from apps.skyparty.application.directory.commands.register_user import RegisterUserCommand
from apps.skyparty.application.directory.commands.select_character import (
    SelectCharacterCommand,
)

__all__ = [
    "ActivateUserCommand",
    "LoginCommand",
    "RegisterUserCommand",
    "SelectCharacterCommand",
]
