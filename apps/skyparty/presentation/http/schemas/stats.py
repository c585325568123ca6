"""Stats HTTP schemas."""

from apps.skyparty.presentation.http.schemas.base import CamelModel


class StatsResponse(CamelModel):
    total_users: int
    active_users: int
    activated_users: int
    total_transactions: int
    pending_gifts: int
    total_credits_in_circulation: int
    total_game_sessions: int


class StatsEnvelope(CamelModel):
    success: bool = True
    stats: StatsResponse
