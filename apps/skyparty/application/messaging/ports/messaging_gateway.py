"""Messaging Gateway Port."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence
from uuid import UUID

from apps.skyparty.domain.entities import Conversation, Message


class MessagingGateway(ABC):
    """대화/메시지 저장소 포트."""

    @abstractmethod
    async def ensure_conversation(self, conversation: Conversation) -> None:
        """대화가 없으면 생성합니다. 이미 있으면 아무것도 하지 않습니다."""
        ...

    @abstractmethod
    async def append_message(self, message: Message) -> Message:
        ...

    @abstractmethod
    async def touch_conversation(self, conversation_id: str, at: datetime) -> None:
        """마지막 활동 시각(updated_at)을 갱신합니다."""
        ...

    @abstractmethod
    async def list_conversations(self, user_id: UUID) -> Sequence[Conversation]:
        """사용자가 참여한 대화 목록 (updated_at 내림차순)."""
        ...

    @abstractmethod
    async def list_messages(self, conversation_ids: Sequence[str]) -> Sequence[Message]:
        """여러 대화의 메시지를 한 번에 조회합니다 (created_at 오름차순)."""
        ...
