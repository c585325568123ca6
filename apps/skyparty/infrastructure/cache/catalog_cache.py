"""Thread-safe singleton catalog cache.

API 서버 시작 시 DB에서 판매 중인 캐릭터 목록을 로드합니다.
카탈로그는 요청 처리 중에 변경되지 않으므로 프로세스 수명 동안 유지됩니다.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Iterable

from apps.skyparty.domain.entities import Character

logger = logging.getLogger(__name__)


class CatalogLocalCache:
    """Thread-safe 싱글톤 카탈로그 캐시.

    Usage:
        cache = get_catalog_cache()
        characters = cache.get_all()
    """

    _instance: CatalogLocalCache | None = None
    _lock = Lock()

    def __new__(cls) -> CatalogLocalCache:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._characters: dict[str, Character] = {}
                    instance._initialized = False
                    instance._data_lock = Lock()
                    cls._instance = instance
        return cls._instance

    @property
    def is_initialized(self) -> bool:
        """캐시가 초기화되었는지 여부."""
        return self._initialized

    def set_all(self, characters: Iterable[Character]) -> None:
        """전체 캐시 교체 (초기화 또는 full refresh)."""
        with self._data_lock:
            self._characters.clear()
            for character in characters:
                self._characters[character.id] = character
            self._initialized = True
            logger.info(
                "catalog_cache_initialized",
                extra={"count": len(self._characters)},
            )

    def get(self, character_id: str) -> Character | None:
        """단일 캐릭터 조회."""
        return self._characters.get(character_id)

    def get_all(self) -> list[Character]:
        """전체 캐릭터 목록 조회 (삽입 순서 유지)."""
        with self._data_lock:
            return list(self._characters.values())

    def count(self) -> int:
        """캐시된 캐릭터 수."""
        return len(self._characters)

    def clear(self) -> None:
        """캐시 초기화 (테스트용)."""
        with self._data_lock:
            self._characters.clear()
            self._initialized = False
            logger.warning("catalog_cache_cleared")


def get_catalog_cache() -> CatalogLocalCache:
    """싱글톤 카탈로그 캐시 인스턴스 반환."""
    return CatalogLocalCache()
