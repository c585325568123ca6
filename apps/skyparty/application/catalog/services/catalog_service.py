"""CatalogService.

Entity를 DTO로 변환하는 등 Catalog 관련 순수 애플리케이션 로직을 담당합니다.
"""

from typing import Sequence

from apps.skyparty.application.catalog.dto import CatalogItem
from apps.skyparty.domain.entities import Character


class CatalogService:
    """카탈로그 서비스."""

    @staticmethod
    def sort_key(character: Character) -> tuple[int, str]:
        """정렬 기준: 가격 오름차순, 이름 오름차순."""
        return (character.price, character.name)

    def build_catalog_items(self, characters: Sequence[Character]) -> tuple[CatalogItem, ...]:
        """Character 엔티티 목록을 CatalogItem DTO 목록으로 변환합니다.

        정책:
        - 비활성 캐릭터 제외
        - 가격, 이름 순 정렬 (저장소 정렬에 의존하지 않음)

        Args:
            characters: 캐릭터 엔티티 목록

        Returns:
            CatalogItem 튜플
        """
        active = sorted((c for c in characters if c.is_active), key=self.sort_key)
        return tuple(self.to_item(c) for c in active)

    @staticmethod
    def to_item(character: Character) -> CatalogItem:
        return CatalogItem(
            id=character.id,
            name=character.name,
            icon=character.icon,
            description=character.description,
            price=character.price,
            rarity=character.rarity,
            category=character.category,
        )
