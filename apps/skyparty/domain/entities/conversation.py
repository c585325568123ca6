"""Conversation / Message Entities - 1:1 메시지."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass
class Conversation:
    """두 사용자 사이의 대화.

    participant1_id <= participant2_id 순서로 정규화되어 저장되며,
    id는 같은 참여자 쌍에 대해 항상 같은 값입니다.
    """

    id: str
    participant1_id: UUID
    participant2_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def key_for(user_a: UUID, user_b: UUID) -> str:
        """참여자 순서와 무관한 대화 ID."""
        first, second = sorted((user_a, user_b), key=str)
        return f"{first}:{second}"

    @classmethod
    def between(cls, user_a: UUID, user_b: UUID, at: datetime | None = None) -> Conversation:
        first, second = sorted((user_a, user_b), key=str)
        now = at or datetime.now(timezone.utc)
        return cls(
            id=cls.key_for(user_a, user_b),
            participant1_id=first,
            participant2_id=second,
            created_at=now,
            updated_at=now,
        )

    def includes(self, user_id: UUID) -> bool:
        return user_id in (self.participant1_id, self.participant2_id)

    def other_participant(self, user_id: UUID) -> UUID:
        """user_id의 상대방. 자기 자신과의 대화면 본인을 반환합니다."""
        return self.participant2_id if user_id == self.participant1_id else self.participant1_id


@dataclass(frozen=True)
class Message:
    """대화 내 메시지 1건. 생성 후 변경되지 않습니다."""

    conversation_id: str
    sender_id: UUID
    recipient_id: UUID
    content: str
    read: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
