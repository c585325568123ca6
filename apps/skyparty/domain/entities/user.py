"""User entity - 게임 계정."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass
class User:
    """사용자 엔티티.

    skyparty.users 테이블과 skyparty.user_owned_characters 테이블에서 조립됩니다.
    잔액(game_credits)은 Ledger를 통해서만 변경됩니다.
    """

    id: UUID
    username: str
    email: str
    password_hash: str = ""
    game_credits: int = 0
    current_character: str | None = None
    owned_characters: set[str] = field(default_factory=set)
    activated: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: datetime | None = None
    activation_code: str | None = None
    activated_at: datetime | None = None

    def owns_character(self, character_id: str) -> bool:
        """캐릭터 보유 여부."""
        return character_id in self.owned_characters

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id
