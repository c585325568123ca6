"""Catalog Reader Port."""

from abc import ABC, abstractmethod
from typing import Sequence

from apps.skyparty.domain.entities import Character


class CatalogReader(ABC):
    """캐릭터 카탈로그 조회 포트.

    인프라스트럭처 계층에서 구현됩니다.
    """

    @abstractmethod
    async def list_active(self) -> Sequence[Character]:
        """판매 중인 캐릭터 목록을 조회합니다.

        Returns:
            가격 오름차순, 같은 가격은 이름 오름차순
        """
        ...

    @abstractmethod
    async def get_by_id(self, character_id: str) -> Character | None:
        """ID로 캐릭터를 조회합니다."""
        ...
