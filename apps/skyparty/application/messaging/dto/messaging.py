"""Messaging DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.skyparty.domain.entities import Message


@dataclass(frozen=True, slots=True)
class SendMessageRequest:
    sender_id: UUID
    recipient_id: UUID
    content: str


@dataclass(frozen=True, slots=True)
class MessageView:
    """메시지 조회 결과 (발신자 username 포함)."""

    id: UUID
    conversation_id: str
    sender_id: UUID
    sender_username: str
    recipient_id: UUID
    content: str
    read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message, sender_username: str) -> MessageView:
        return cls(
            id=message.id,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            sender_username=sender_username,
            recipient_id=message.recipient_id,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )


@dataclass(frozen=True, slots=True)
class ConversationView:
    """대화 조회 결과.

    Attributes:
        id: 대화 ID
        other_participant_id: 상대방 ID
        other_participant_username: 상대방 username (탈퇴 등으로 없으면 빈 문자열)
        messages: 메시지 (오래된 순)
        last_activity: 마지막 활동 시각
    """

    id: str
    other_participant_id: UUID
    other_participant_username: str
    messages: tuple[MessageView, ...]
    last_activity: datetime
