"""Local Cached Catalog Reader Implementation.

로컬 인메모리 캐시를 사용하는 CatalogReader 구현입니다.

Architecture:
    - 로컬 캐시가 초기화된 경우: 캐시에서 즉시 반환
    - 로컬 캐시가 비어있는 경우: delegate(DB Reader)로 fallback
"""

from __future__ import annotations

import logging
from typing import Sequence

from apps.skyparty.application.catalog.ports import CatalogReader
from apps.skyparty.domain.entities import Character
from apps.skyparty.infrastructure.cache.catalog_cache import (
    CatalogLocalCache,
    get_catalog_cache,
)

logger = logging.getLogger(__name__)


class LocalCachedCatalogReader(CatalogReader):
    """로컬 인메모리 캐시를 활용한 카탈로그 Reader.

    DB Reader를 데코레이트하여 로컬 캐시 레이어를 추가합니다.

    Flow:
        1. 로컬 캐시 확인 (initialized && count > 0)
        2. 캐시 hit → 즉시 반환
        3. 캐시 miss → delegate(DB Reader) 호출 → 캐시에 저장 → 반환
    """

    def __init__(
        self,
        delegate: CatalogReader,
        cache: CatalogLocalCache | None = None,
    ) -> None:
        """Initialize.

        Args:
            delegate: 실제 DB Reader
            cache: 로컬 캐시 (None이면 싱글톤 사용)
        """
        self._delegate = delegate
        self._cache = cache or get_catalog_cache()

    async def list_active(self) -> Sequence[Character]:
        if self._cache.is_initialized and self._cache.count() > 0:
            logger.debug("Cache hit for catalog (local)")
            return self._cache.get_all()

        logger.debug("Cache miss for catalog, fetching from DB")
        characters = await self._delegate.list_active()
        if characters:
            self._cache.set_all(characters)
        return characters

    async def get_by_id(self, character_id: str) -> Character | None:
        """단건 조회. 캐시에 없으면 DB를 조회합니다 (판매 중지 캐릭터 포함)."""
        cached = self._cache.get(character_id)
        if cached is not None:
            return cached
        return await self._delegate.get_by_id(character_id)
