"""User-related HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from apps.skyparty.application.directory.dto import UserView
from apps.skyparty.presentation.http.schemas.base import CamelModel


class RegisterUserRequestSchema(CamelModel):
    """회원 가입 요청 스키마."""

    username: str = Field(..., min_length=1, max_length=64, description="사용자 이름")
    email: str = Field(..., min_length=3, max_length=320, description="이메일")
    password: str = Field(..., min_length=1, description="비밀번호")


class LoginRequestSchema(CamelModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1)


class ActivateUserRequestSchema(CamelModel):
    """계정 활성화 요청 스키마."""

    activation_code: str = Field(..., min_length=1, max_length=32, description="활성화 코드")


class UserResponse(CamelModel):
    """사용자 응답 스키마 (본인 조회용)."""

    id: UUID
    username: str
    email: str
    game_credits: int = Field(..., description="보유 크레딧")
    current_character: str | None = Field(None, description="현재 캐릭터 ID")
    owned_characters: list[str] = Field(default_factory=list, description="보유 캐릭터 ID 목록")
    activated: bool
    activated_at: datetime | None = None
    created_at: datetime
    last_login_at: datetime | None = None

    @classmethod
    def from_view(cls, view: UserView) -> UserResponse:
        return cls(
            id=view.id,
            username=view.username,
            email=view.email,
            game_credits=view.game_credits,
            current_character=view.current_character,
            owned_characters=list(view.owned_characters),
            activated=view.activated,
            activated_at=view.activated_at,
            created_at=view.created_at,
            last_login_at=view.last_login_at,
        )


class UserSummaryResponse(CamelModel):
    """검색 결과용 공개 프로필 스키마."""

    id: UUID
    username: str
    current_character: str | None = None


class UserEnvelope(CamelModel):
    success: bool = True
    user: UserResponse


class UserSearchResponse(CamelModel):
    success: bool = True
    users: list[UserSummaryResponse]
