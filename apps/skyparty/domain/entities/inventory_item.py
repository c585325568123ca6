"""InventoryItem Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.skyparty.domain.enums import ItemSource, ItemType
from apps.skyparty.domain.value_objects import ItemSnapshot


@dataclass
class InventoryItem:
    """인벤토리 아이템 엔티티.

    생성 이후 변경되지 않으며, 같은 내용의 아이템도 각각 별도 행으로 쌓입니다.

    Attributes:
        id: 아이템 ID
        owner_id: 소유자 ID
        type: 아이템 종류
        name: 이름
        source: 획득 경로
        character_id: 캐릭터 아이템인 경우 캐릭터 ID
        icon: 아이콘
        description: 설명
        price: 가격
        acquired_at: 획득 시각
    """

    owner_id: UUID
    type: str
    name: str
    source: ItemSource
    character_id: str | None = None
    icon: str = ""
    description: str = ""
    price: int = 0
    id: UUID = field(default_factory=uuid4)
    acquired_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_snapshot(
        cls,
        owner_id: UUID,
        snapshot: ItemSnapshot,
        source: ItemSource,
    ) -> InventoryItem:
        """선물 스냅샷으로부터 새 인벤토리 행을 만듭니다."""
        return cls(
            owner_id=owner_id,
            type=ItemType.CHARACTER.value if snapshot.character_id else ItemType.ITEM.value,
            character_id=snapshot.character_id,
            name=snapshot.name,
            icon=snapshot.icon,
            description=snapshot.description,
            price=snapshot.price,
            source=source,
        )
