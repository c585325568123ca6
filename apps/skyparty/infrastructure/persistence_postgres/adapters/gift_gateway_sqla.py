"""SQLAlchemy implementation of gift gateway."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.gift.ports import GiftGateway
from apps.skyparty.domain.entities import Gift
from apps.skyparty.domain.enums import GiftStatus
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    gift_to_values,
    row_to_gift,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import gifts_table


class SqlaGiftGateway(GiftGateway):
    """선물 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, gift: Gift) -> Gift:
        await self._session.execute(gifts_table.insert().values(**gift_to_values(gift)))
        return gift

    async def list_pending_for_recipient(self, recipient_id: UUID) -> Sequence[Gift]:
        result = await self._session.execute(
            select(gifts_table)
            .where(
                gifts_table.c.recipient_id == recipient_id,
                gifts_table.c.status == GiftStatus.PENDING.value,
            )
            .order_by(gifts_table.c.created_at.desc(), gifts_table.c.id.desc())
        )
        return [row_to_gift(row) for row in result.mappings().all()]

    async def transition(
        self,
        gift_id: UUID,
        recipient_id: UUID,
        sources: frozenset[GiftStatus],
        target: GiftStatus,
        at: datetime,
    ) -> Gift | None:
        """UPDATE ... WHERE status IN (sources) RETURNING 으로 전이합니다.

        동시에 실행된 두 번째 UPDATE는 첫 번째 커밋 후 조건을 다시 평가하여
        0행을 갱신합니다.
        """
        result = await self._session.execute(
            update(gifts_table)
            .where(
                gifts_table.c.id == gift_id,
                gifts_table.c.recipient_id == recipient_id,
                gifts_table.c.status.in_([status.value for status in sources]),
            )
            .values(status=target.value, claimed_at=at)
            .returning(*gifts_table.c)
        )
        row = result.mappings().one_or_none()
        return row_to_gift(row) if row else None

    async def get_for_recipient(self, gift_id: UUID, recipient_id: UUID) -> Gift | None:
        result = await self._session.execute(
            select(gifts_table).where(
                gifts_table.c.id == gift_id,
                gifts_table.c.recipient_id == recipient_id,
            )
        )
        row = result.mappings().one_or_none()
        return row_to_gift(row) if row else None
