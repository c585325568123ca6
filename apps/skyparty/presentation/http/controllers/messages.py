"""Messages controller - 1:1 메시지."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.skyparty.application.messaging.commands import SendMessageCommand
from apps.skyparty.application.messaging.dto import SendMessageRequest
from apps.skyparty.application.messaging.queries import ListConversationsQuery
from apps.skyparty.infrastructure.observability.metrics import MESSAGE_SENT_TOTAL
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import (
    ConversationListResponse,
    ConversationResponse,
    MessageResponse,
    SendMessageRequestSchema,
    SendMessageResponse,
)
from apps.skyparty.setup.dependencies import (
    get_list_conversations_query,
    get_send_message_command,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    body: SendMessageRequestSchema,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: SendMessageCommand = Depends(get_send_message_command),
) -> SendMessageResponse:
    """메시지를 보냅니다. 상대와의 대화가 없으면 새로 만듭니다."""
    view = await command.execute(
        SendMessageRequest(
            sender_id=auth_user_id,
            recipient_id=body.recipient_id,
            content=body.content,
        )
    )
    MESSAGE_SENT_TOTAL.inc()
    return SendMessageResponse(message=MessageResponse.from_view(view))


@router.get("/conversations", response_model=ConversationListResponse)
async def list_conversations(
    auth_user_id: UUID = Depends(get_auth_user_id),
    query: ListConversationsQuery = Depends(get_list_conversations_query),
) -> ConversationListResponse:
    """현재 사용자의 대화 목록 (최근 활동 순)."""
    views = await query.execute(auth_user_id)
    return ConversationListResponse(
        conversations=[ConversationResponse.from_view(v) for v in views]
    )
