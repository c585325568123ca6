"""ListConversationsQuery."""

from __future__ import annotations

from collections import defaultdict
from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.messaging.dto import ConversationView, MessageView
from apps.skyparty.application.messaging.ports import MessagingGateway
from apps.skyparty.domain.entities import Message


class ListConversationsQuery:
    """사용자의 대화 목록을 메시지와 함께 조회합니다.

    대화는 최근 활동 순, 각 대화의 메시지는 오래된 순입니다.
    """

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        messaging_gateway: MessagingGateway,
    ) -> None:
        self._user_gateway = user_gateway
        self._messaging_gateway = messaging_gateway

    async def execute(self, user_id: UUID) -> list[ConversationView]:
        if not await self._user_gateway.exists(user_id):
            raise UserNotFoundError()

        conversations = await self._messaging_gateway.list_conversations(user_id)
        if not conversations:
            return []

        messages = await self._messaging_gateway.list_messages([c.id for c in conversations])
        by_conversation: dict[str, list[Message]] = defaultdict(list)
        for message in messages:
            by_conversation[message.conversation_id].append(message)

        participant_ids = {c.participant1_id for c in conversations} | {
            c.participant2_id for c in conversations
        }
        usernames = await self._user_gateway.get_usernames(sorted(participant_ids, key=str))

        views = []
        for conversation in conversations:
            other_id = conversation.other_participant(user_id)
            views.append(
                ConversationView(
                    id=conversation.id,
                    other_participant_id=other_id,
                    other_participant_username=usernames.get(other_id, ""),
                    messages=tuple(
                        MessageView.from_entity(m, usernames.get(m.sender_id, ""))
                        for m in by_conversation[conversation.id]
                    ),
                    last_activity=conversation.updated_at,
                )
            )
        return views
