"""Inventory DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.skyparty.domain.entities import InventoryItem


@dataclass(frozen=True, slots=True)
class AddInventoryItemRequest:
    """인벤토리 추가 요청."""

    owner_id: UUID
    type: str
    name: str
    character_id: str | None = None
    icon: str = ""
    description: str = ""
    price: int = 0


@dataclass(frozen=True, slots=True)
class InventoryItemView:
    """인벤토리 아이템 조회 결과."""

    id: UUID
    owner_id: UUID
    type: str
    character_id: str | None
    name: str
    icon: str
    description: str
    price: int
    source: str
    acquired_at: datetime

    @classmethod
    def from_entity(cls, item: InventoryItem) -> InventoryItemView:
        return cls(
            id=item.id,
            owner_id=item.owner_id,
            type=item.type,
            character_id=item.character_id,
            name=item.name,
            icon=item.icon,
            description=item.description,
            price=item.price,
            source=item.source.value,
            acquired_at=item.acquired_at,
        )


@dataclass(frozen=True, slots=True)
class PurchaseResult:
    """캐릭터 구매 결과.

    Attributes:
        character_id: 구매한 캐릭터 ID
        new_balance: 차감 후 잔액
        owned_characters: 구매 후 보유 캐릭터 목록
    """

    character_id: str
    new_balance: int
    owned_characters: tuple[str, ...]
