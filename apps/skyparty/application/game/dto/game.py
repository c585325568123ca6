"""Game DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class PlayGameRequest:
    user_id: UUID
    game_type: str
    earned_credits: int
    duration_seconds: int | None = None


@dataclass(frozen=True, slots=True)
class PlayGameResult:
    """플레이 결과.

    Attributes:
        session_id: 기록된 플레이 ID
        earned_credits: 지급된 크레딧
        new_balance: 지급 후 잔액
    """

    session_id: UUID
    earned_credits: int
    new_balance: int
