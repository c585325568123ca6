"""SQLAlchemy Catalog Reader/Writer Implementation."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.catalog.ports import CatalogReader, CatalogWriter
from apps.skyparty.domain.entities import Character
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    character_to_values,
    row_to_character,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import characters_table

logger = logging.getLogger(__name__)


class SqlaCatalogReader(CatalogReader):
    """SQLAlchemy 기반 카탈로그 Reader."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def list_active(self) -> Sequence[Character]:
        result = await self._session.execute(
            select(characters_table)
            .where(characters_table.c.is_active.is_(True))
            .order_by(characters_table.c.price, characters_table.c.name)
        )
        return [row_to_character(row) for row in result.mappings().all()]

    async def get_by_id(self, character_id: str) -> Character | None:
        result = await self._session.execute(
            select(characters_table).where(characters_table.c.id == character_id)
        )
        row = result.mappings().one_or_none()
        return row_to_character(row) if row else None


class SqlaCatalogWriter(CatalogWriter):
    """SQLAlchemy 기반 카탈로그 시드 Writer.

    ON CONFLICT (id) DO NOTHING 으로 기존 행을 보존합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_if_absent(self, characters: Sequence[Character]) -> int:
        inserted = 0
        for character in characters:
            stmt = (
                pg_insert(characters_table)
                .values(**character_to_values(character))
                .on_conflict_do_nothing(index_elements=["id"])
            )
            result = await self._session.execute(stmt)
            if result.rowcount > 0:
                inserted += 1

        logger.debug(
            "Catalog insert completed",
            extra={"total": len(characters), "inserted": inserted},
        )
        return inserted
