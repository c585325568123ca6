"""User DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.skyparty.domain.entities import User


@dataclass(frozen=True, slots=True)
class RegisterUserRequest:
    """회원 가입 요청."""

    username: str
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginRequest:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class ActivateUserRequest:
    """활성화 코드 입력 요청."""

    user_id: UUID
    activation_code: str


@dataclass(frozen=True, slots=True)
class UserView:
    """사용자 조회 결과.

    비밀번호 해시와 활성화 코드는 포함하지 않습니다.
    """

    id: UUID
    username: str
    email: str
    game_credits: int
    current_character: str | None
    owned_characters: tuple[str, ...]
    activated: bool
    created_at: datetime
    last_login_at: datetime | None = None
    activated_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> UserView:
        """User 엔티티에서 생성."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            game_credits=user.game_credits,
            current_character=user.current_character,
            owned_characters=tuple(sorted(user.owned_characters)),
            activated=user.activated,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
            activated_at=user.activated_at,
        )
