"""SQLAlchemy implementation of inventory gateway."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.domain.entities import InventoryItem
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    inventory_item_to_values,
    row_to_inventory_item,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import inventory_items_table


class SqlaInventoryGateway(InventoryGateway):
    """인벤토리 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, item: InventoryItem) -> UUID:
        await self._session.execute(
            inventory_items_table.insert().values(**inventory_item_to_values(item))
        )
        return item.id

    async def list_by_owner(self, owner_id: UUID) -> Sequence[InventoryItem]:
        result = await self._session.execute(
            select(inventory_items_table)
            .where(inventory_items_table.c.owner_id == owner_id)
            .order_by(
                inventory_items_table.c.acquired_at.desc(),
                inventory_items_table.c.id.desc(),
            )
        )
        return [row_to_inventory_item(row) for row in result.mappings().all()]
