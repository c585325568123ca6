"""Catalog DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """카탈로그 아이템.

    Attributes:
        id: 캐릭터 ID
        name: 캐릭터 이름
        icon: 아이콘
        description: 캐릭터 설명
        price: 가격
        rarity: 희귀도
        category: 분류
    """

    id: str
    name: str
    icon: str
    description: str
    price: int
    rarity: str
    category: str


@dataclass(frozen=True, slots=True)
class CatalogResult:
    """카탈로그 조회 결과.

    Attributes:
        items: 카탈로그 아이템 목록
        total: 전체 개수
    """

    items: tuple[CatalogItem, ...]
    total: int
