"""Character Entity.

구매 가능한 캐릭터 카탈로그 엔트리입니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Character:
    """캐릭터 엔티티.

    시작 시 시드되는 정적 참조 데이터입니다.

    Attributes:
        id: 캐릭터 ID (예: "kitty", "dragon")
        name: 캐릭터 이름
        icon: 아이콘
        description: 캐릭터 설명
        price: 가격 (크레딧)
        rarity: 희귀도
        category: 분류
        is_active: 카탈로그 노출 여부
    """

    id: str
    name: str
    icon: str = ""
    description: str = ""
    price: int = 0
    rarity: str = "common"
    category: str = "character"
    is_active: bool = True

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return False
        return self.id == other.id
