"""GameSession Entity - 미니게임 플레이 기록."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class GameSession:
    user_id: UUID
    game_type: str
    earned_credits: int
    duration_seconds: int | None = None
    id: UUID = field(default_factory=uuid4)
    played_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
