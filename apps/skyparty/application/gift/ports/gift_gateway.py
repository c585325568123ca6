"""Gift Gateway Port."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence
from uuid import UUID

from apps.skyparty.domain.entities import Gift
from apps.skyparty.domain.enums import GiftStatus


class GiftGateway(ABC):
    """선물 저장소 포트."""

    @abstractmethod
    async def create(self, gift: Gift) -> Gift:
        """pending 상태 선물을 저장합니다."""
        ...

    @abstractmethod
    async def list_pending_for_recipient(self, recipient_id: UUID) -> Sequence[Gift]:
        """수신자의 pending 선물을 최신순으로 조회합니다."""
        ...

    @abstractmethod
    async def transition(
        self,
        gift_id: UUID,
        recipient_id: UUID,
        sources: frozenset[GiftStatus],
        target: GiftStatus,
        at: datetime,
    ) -> Gift | None:
        """선물을 target 상태로 전이합니다 (compare-and-set).

        id, recipient_id가 일치하고 status가 sources에 속하는 행만 갱신하는
        단일 조건부 UPDATE로 구현해야 합니다. 동시에 여러 요청이 들어와도
        하나만 성공합니다.

        Returns:
            전이된 선물, 조건에 맞는 행이 없으면 None
        """
        ...

    @abstractmethod
    async def get_for_recipient(self, gift_id: UUID, recipient_id: UUID) -> Gift | None:
        """수신자에게 온 선물을 상태와 무관하게 조회합니다."""
        ...
