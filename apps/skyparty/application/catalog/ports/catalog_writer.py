"""Catalog Writer Port."""

from abc import ABC, abstractmethod
from typing import Sequence

from apps.skyparty.domain.entities import Character


class CatalogWriter(ABC):
    """카탈로그 시드 포트."""

    @abstractmethod
    async def insert_if_absent(self, characters: Sequence[Character]) -> int:
        """ID가 없는 캐릭터만 추가합니다.

        기존 행은 수정하지 않습니다 (ON CONFLICT DO NOTHING).

        Returns:
            실제 삽입된 행 수
        """
        ...
