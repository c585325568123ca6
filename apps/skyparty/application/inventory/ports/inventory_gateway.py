"""Inventory Gateway Port."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from apps.skyparty.domain.entities import InventoryItem


class InventoryGateway(ABC):
    """인벤토리 저장소 포트.

    추가만 가능하며 기존 행은 수정하거나 삭제하지 않습니다.
    """

    @abstractmethod
    async def append(self, item: InventoryItem) -> UUID:
        """아이템을 추가하고 ID를 반환합니다.

        같은 내용의 아이템이 이미 있어도 새 행으로 추가합니다.
        """
        ...

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> Sequence[InventoryItem]:
        """소유자의 아이템을 최신순으로 조회합니다 (acquired_at DESC, id)."""
        ...
