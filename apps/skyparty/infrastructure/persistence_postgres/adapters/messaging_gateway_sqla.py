"""SQLAlchemy implementation of messaging gateway."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.messaging.ports import MessagingGateway
from apps.skyparty.domain.entities import Conversation, Message
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    conversation_to_values,
    message_to_values,
    row_to_conversation,
    row_to_message,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import (
    conversations_table,
    messages_table,
)


class SqlaMessagingGateway(MessagingGateway):
    """대화/메시지 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def ensure_conversation(self, conversation: Conversation) -> None:
        """동시에 첫 메시지를 보내도 대화 행은 하나만 생깁니다."""
        stmt = (
            pg_insert(conversations_table)
            .values(**conversation_to_values(conversation))
            .on_conflict_do_nothing(index_elements=["id"])
        )
        await self._session.execute(stmt)

    async def append_message(self, message: Message) -> Message:
        await self._session.execute(messages_table.insert().values(**message_to_values(message)))
        return message

    async def touch_conversation(self, conversation_id: str, at: datetime) -> None:
        await self._session.execute(
            update(conversations_table)
            .where(conversations_table.c.id == conversation_id)
            .values(updated_at=at)
        )

    async def list_conversations(self, user_id: UUID) -> Sequence[Conversation]:
        result = await self._session.execute(
            select(conversations_table)
            .where(
                or_(
                    conversations_table.c.participant1_id == user_id,
                    conversations_table.c.participant2_id == user_id,
                )
            )
            .order_by(conversations_table.c.updated_at.desc(), conversations_table.c.id)
        )
        return [row_to_conversation(row) for row in result.mappings().all()]

    async def list_messages(self, conversation_ids: Sequence[str]) -> Sequence[Message]:
        if not conversation_ids:
            return []
        result = await self._session.execute(
            select(messages_table)
            .where(messages_table.c.conversation_id.in_(list(conversation_ids)))
            .order_by(messages_table.c.created_at, messages_table.c.id)
        )
        return [row_to_message(row) for row in result.mappings().all()]
