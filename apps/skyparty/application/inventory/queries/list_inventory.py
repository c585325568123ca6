"""ListInventoryQuery."""

from __future__ import annotations

from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.inventory.dto import InventoryItemView
from apps.skyparty.application.inventory.ports import InventoryGateway


class ListInventoryQuery:
    """사용자 인벤토리 조회 (최신순)."""

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        inventory_gateway: InventoryGateway,
    ) -> None:
        self._user_gateway = user_gateway
        self._inventory_gateway = inventory_gateway

    async def execute(self, owner_id: UUID) -> list[InventoryItemView]:
        if not await self._user_gateway.exists(owner_id):
            raise UserNotFoundError()
        items = await self._inventory_gateway.list_by_owner(owner_id)
        return [InventoryItemView.from_entity(item) for item in items]
