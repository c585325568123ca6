"""Admin controller - 운영 통계 (내부 호출 전용)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from apps.skyparty.application.stats.queries import GetStatsQuery
from apps.skyparty.presentation.http.auth import require_internal_token
from apps.skyparty.presentation.http.schemas import StatsEnvelope, StatsResponse
from apps.skyparty.setup.dependencies import get_stats_query

router = APIRouter(
    prefix="/internal",
    tags=["admin"],
    dependencies=[Depends(require_internal_token)],
)


@router.get("/stats", response_model=StatsEnvelope)
async def get_stats(query: GetStatsQuery = Depends(get_stats_query)) -> StatsEnvelope:
    stats = await query.execute()
    return StatsEnvelope(
        stats=StatsResponse(
            total_users=stats.total_users,
            active_users=stats.active_users,
            activated_users=stats.activated_users,
            total_transactions=stats.total_transactions,
            pending_gifts=stats.pending_gifts,
            total_credits_in_circulation=stats.total_credits_in_circulation,
            total_game_sessions=stats.total_game_sessions,
        )
    )
