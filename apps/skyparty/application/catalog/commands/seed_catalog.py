"""SeedCatalogCommand.

앱 시작 시 기본 캐릭터 카탈로그를 시드합니다.
"""

import logging
from typing import Sequence

from apps.skyparty.application.catalog.ports import CatalogWriter
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.domain.entities import Character

logger = logging.getLogger(__name__)


class SeedCatalogCommand:
    """카탈로그 시드 Command.

    ID가 없는 행만 추가하므로 여러 번 실행해도 중복되거나
    운영 중 수정된 행을 덮어쓰지 않습니다.
    """

    def __init__(self, writer: CatalogWriter, transaction_manager: TransactionManager) -> None:
        self._writer = writer
        self._transaction_manager = transaction_manager

    async def execute(self, characters: Sequence[Character]) -> int:
        """시드를 적용하고 삽입된 행 수를 반환합니다."""
        if not characters:
            return 0

        async with self._transaction_manager.begin():
            inserted = await self._writer.insert_if_absent(characters)

        logger.info(
            "Catalog seeded",
            extra={"total": len(characters), "inserted": inserted},
        )
        return inserted
