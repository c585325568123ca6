"""Messaging HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from apps.skyparty.application.messaging.dto import ConversationView, MessageView
from apps.skyparty.presentation.http.schemas.base import CamelModel


class SendMessageRequestSchema(CamelModel):
    """메시지 전송 요청 스키마."""

    recipient_id: UUID = Field(..., description="수신자 ID")
    content: str = Field(..., min_length=1, max_length=2000, description="메시지 내용")


class MessageResponse(CamelModel):
    id: UUID
    conversation_id: str
    sender: str = Field(..., description="발신자 username")
    sender_id: UUID
    recipient_id: UUID
    content: str
    read: bool
    timestamp: datetime

    @classmethod
    def from_view(cls, view: MessageView) -> MessageResponse:
        return cls(
            id=view.id,
            conversation_id=view.conversation_id,
            sender=view.sender_username,
            sender_id=view.sender_id,
            recipient_id=view.recipient_id,
            content=view.content,
            read=view.read,
            timestamp=view.created_at,
        )


class ConversationResponse(CamelModel):
    """대화 응답 스키마 (메시지는 오래된 순)."""

    id: str
    other_participant: str
    other_participant_id: UUID
    messages: list[MessageResponse]
    last_activity: datetime

    @classmethod
    def from_view(cls, view: ConversationView) -> ConversationResponse:
        return cls(
            id=view.id,
            other_participant=view.other_participant_username,
            other_participant_id=view.other_participant_id,
            messages=[MessageResponse.from_view(m) for m in view.messages],
            last_activity=view.last_activity,
        )


class SendMessageResponse(CamelModel):
    success: bool = True
    message: MessageResponse


class ConversationListResponse(CamelModel):
    success: bool = True
    conversations: list[ConversationResponse]
