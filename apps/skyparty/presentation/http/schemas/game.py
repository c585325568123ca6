"""Game HTTP schemas."""

from uuid import UUID

from pydantic import Field

from apps.skyparty.presentation.http.schemas.base import CamelModel


class PlayGameRequestSchema(CamelModel):
    """미니게임 결과 보고 스키마.

    보상 상한은 서버 설정(max_game_reward)으로 한 번 더 검사됩니다.
    """

    game_type: str = Field(..., min_length=1, max_length=64, description="게임 종류")
    earned_credits: int = Field(..., ge=0, description="획득 크레딧")
    duration_seconds: int | None = Field(None, ge=0, description="플레이 시간(초)")


class PlayGameResponse(CamelModel):
    success: bool = True
    session_id: UUID
    earned_credits: int
    new_balance: int
