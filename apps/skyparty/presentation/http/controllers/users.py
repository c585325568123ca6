"""Users controller - 가입, 로그인, 활성화, 본인 조회, 검색."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from apps.skyparty.application.directory.commands import (
    ActivateUserCommand,
    LoginCommand,
    RegisterUserCommand,
)
from apps.skyparty.application.directory.dto import (
    ActivateUserRequest,
    LoginRequest,
    RegisterUserRequest,
)
from apps.skyparty.application.directory.queries import GetUserQuery, SearchUsersQuery
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import (
    ActivateUserRequestSchema,
    LoginRequestSchema,
    RegisterUserRequestSchema,
    UserEnvelope,
    UserResponse,
    UserSearchResponse,
    UserSummaryResponse,
)
from apps.skyparty.setup.dependencies import (
    get_activate_user_command,
    get_login_command,
    get_register_user_command,
    get_search_users_query,
    get_user_query,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def register_user(
    body: RegisterUserRequestSchema,
    command: RegisterUserCommand = Depends(get_register_user_command),
) -> UserEnvelope:
    """사용자를 등록합니다 (기본 크레딧, 스타터 캐릭터 지급)."""
    view = await command.execute(
        RegisterUserRequest(username=body.username, email=body.email, password=body.password)
    )
    return UserEnvelope(user=UserResponse.from_view(view))


@router.post("/login", response_model=UserEnvelope)
async def login(
    body: LoginRequestSchema,
    command: LoginCommand = Depends(get_login_command),
) -> UserEnvelope:
    """email/비밀번호를 검증합니다. 세션 발급은 게이트웨이가 담당합니다."""
    view = await command.execute(LoginRequest(email=body.email, password=body.password))
    return UserEnvelope(user=UserResponse.from_view(view))


@router.get("/me", response_model=UserEnvelope)
async def get_me(
    auth_user_id: UUID = Depends(get_auth_user_id),
    query: GetUserQuery = Depends(get_user_query),
) -> UserEnvelope:
    """현재 사용자 정보를 조회합니다."""
    view = await query.execute(auth_user_id)
    return UserEnvelope(user=UserResponse.from_view(view))


@router.post("/me/activate", response_model=UserEnvelope)
async def activate_me(
    body: ActivateUserRequestSchema,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: ActivateUserCommand = Depends(get_activate_user_command),
) -> UserEnvelope:
    view = await command.execute(
        ActivateUserRequest(user_id=auth_user_id, activation_code=body.activation_code)
    )
    return UserEnvelope(user=UserResponse.from_view(view))


@router.get("/search", response_model=UserSearchResponse)
async def search_users(
    query: str = Query("", max_length=64),
    auth_user_id: UUID = Depends(get_auth_user_id),
    search: SearchUsersQuery = Depends(get_search_users_query),
) -> UserSearchResponse:
    """username으로 다른 사용자를 검색합니다 (본인 제외)."""
    views = await search.execute(query, exclude_user_id=auth_user_id)
    return UserSearchResponse(
        users=[
            UserSummaryResponse(
                id=v.id,
                username=v.username,
                current_character=v.current_character,
            )
            for v in views
        ]
    )
