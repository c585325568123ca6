"""Item Snapshot Value Object.

선물 생성 시점의 아이템 정보를 복사해 둔 불변 값 객체입니다.
이후 카탈로그가 변경되어도 선물 내용은 바뀌지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ItemSnapshot:
    """선물 아이템 스냅샷.

    Attributes:
        name: 아이템 이름
        icon: 아이콘 (이모지 또는 URL)
        description: 설명
        price: 카탈로그 가격
        character_id: 캐릭터 선물인 경우 캐릭터 ID
        amount: 크레딧 선물인 경우 지급 수량
    """

    name: str
    icon: str = ""
    description: str = ""
    price: int = 0
    character_id: str | None = None
    amount: int | None = None

    @property
    def is_empty(self) -> bool:
        """이름이 비어 있으면 빈 스냅샷으로 간주합니다."""
        return not self.name.strip()

    def to_dict(self) -> dict[str, Any]:
        """JSON 컬럼 저장용 dict 변환."""
        data: dict[str, Any] = {
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "price": self.price,
        }
        if self.character_id is not None:
            data["character_id"] = self.character_id
        if self.amount is not None:
            data["amount"] = self.amount
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ItemSnapshot:
        """dict에서 생성."""
        return cls(
            name=data.get("name", ""),
            icon=data.get("icon") or "",
            description=data.get("description") or "",
            price=int(data.get("price") or 0),
            character_id=data.get("character_id"),
            amount=int(data["amount"]) if data.get("amount") is not None else None,
        )
