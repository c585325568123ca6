"""SendMessageCommand - 메시지 전송 UseCase."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from apps.skyparty.application.common.exceptions import InvalidPartyError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.messaging.dto import MessageView, SendMessageRequest
from apps.skyparty.application.messaging.ports import MessagingGateway
from apps.skyparty.domain.entities import Conversation, Message

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


class SendMessageCommand:
    """메시지 전송 Command.

    두 사용자 사이의 대화가 없으면 만들고, 메시지를 추가한 뒤
    대화의 마지막 활동 시각을 갱신합니다. 세 단계는 한 트랜잭션입니다.
    """

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        messaging_gateway: MessagingGateway,
        transaction_manager: TransactionManager,
    ) -> None:
        self._user_gateway = user_gateway
        self._messaging_gateway = messaging_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: SendMessageRequest) -> MessageView:
        """Raises:
        ValidationError: 빈 메시지 또는 길이 초과
        InvalidPartyError: 발신자 또는 수신자 없음
        """
        content = request.content.strip()
        if not content:
            raise ValidationError("Message content is required")
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message must not exceed {MAX_MESSAGE_LENGTH} characters")

        async with self._transaction_manager.begin():
            usernames = await self._user_gateway.get_usernames(
                [request.sender_id, request.recipient_id]
            )
            if request.sender_id not in usernames or request.recipient_id not in usernames:
                raise InvalidPartyError()

            now = datetime.now(timezone.utc)
            conversation = Conversation.between(request.sender_id, request.recipient_id, at=now)
            await self._messaging_gateway.ensure_conversation(conversation)
            message = await self._messaging_gateway.append_message(
                Message(
                    conversation_id=conversation.id,
                    sender_id=request.sender_id,
                    recipient_id=request.recipient_id,
                    content=content,
                    created_at=now,
                )
            )
            await self._messaging_gateway.touch_conversation(conversation.id, now)

        logger.info(
            "Message sent",
            extra={
                "message_id": str(message.id),
                "conversation_id": conversation.id,
                "sender_id": str(request.sender_id),
            },
        )
        return MessageView.from_entity(message, usernames[request.sender_id])
