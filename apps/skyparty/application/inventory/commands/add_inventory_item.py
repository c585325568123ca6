"""AddInventoryItemCommand."""

from __future__ import annotations

import logging
from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.inventory.dto import AddInventoryItemRequest
from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.entities import InventoryItem
from apps.skyparty.domain.enums import ItemSource

logger = logging.getLogger(__name__)


class AddInventoryItemCommand:
    """클라이언트가 획득한 아이템을 인벤토리에 추가합니다.

    보유 캐릭터 집합이나 잔액은 변경하지 않습니다.
    """

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        inventory_gateway: InventoryGateway,
        transaction_manager: TransactionManager,
    ) -> None:
        self._user_gateway = user_gateway
        self._inventory_gateway = inventory_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: AddInventoryItemRequest) -> UUID:
        """Raises:
        ValidationError: 이름 또는 종류 누락, 가격 범위 초과
        UserNotFoundError: 소유자 없음
        """
        if not request.name.strip() or not request.type.strip():
            raise ValidationError("Item type and name are required")
        if not 0 <= request.price <= MAX_CREDIT_AMOUNT:
            raise ValidationError(f"Price must be between 0 and {MAX_CREDIT_AMOUNT}")

        async with self._transaction_manager.begin():
            if not await self._user_gateway.exists(request.owner_id):
                raise UserNotFoundError()
            item_id = await self._inventory_gateway.append(
                InventoryItem(
                    owner_id=request.owner_id,
                    type=request.type,
                    character_id=request.character_id,
                    name=request.name,
                    icon=request.icon,
                    description=request.description,
                    price=request.price,
                    source=ItemSource.PURCHASE,
                )
            )

        logger.debug("Inventory item added", extra={"user_id": str(request.owner_id)})
        return item_id
