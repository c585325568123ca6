"""Games controller - 미니게임 보상."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.skyparty.application.game.commands import PlayGameCommand
from apps.skyparty.application.game.dto import PlayGameRequest
from apps.skyparty.infrastructure.observability.metrics import (
    GAME_PLAYED_TOTAL,
    GAME_REWARD_CREDITS_TOTAL,
)
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import PlayGameRequestSchema, PlayGameResponse
from apps.skyparty.setup.dependencies import get_play_game_command

router = APIRouter(prefix="/games", tags=["games"])


@router.post("/play", response_model=PlayGameResponse)
async def play_game(
    body: PlayGameRequestSchema,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: PlayGameCommand = Depends(get_play_game_command),
) -> PlayGameResponse:
    """플레이 결과를 기록하고 획득 크레딧을 지급합니다."""
    result = await command.execute(
        PlayGameRequest(
            user_id=auth_user_id,
            game_type=body.game_type,
            earned_credits=body.earned_credits,
            duration_seconds=body.duration_seconds,
        )
    )
    GAME_PLAYED_TOTAL.inc()
    GAME_REWARD_CREDITS_TOTAL.inc(result.earned_credits)
    return PlayGameResponse(
        session_id=result.session_id,
        earned_credits=result.earned_credits,
        new_balance=result.new_balance,
    )
