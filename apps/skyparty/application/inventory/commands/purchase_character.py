"""PurchaseCharacterCommand - 캐릭터 구매 UseCase.

Flow:
    1. 사용자/카탈로그 조회
    2. 카탈로그 가격만큼 잔액 차감 (Ledger)
    3. 보유 캐릭터 합집합 + 인벤토리 행 추가 (source=purchase)

모든 단계가 하나의 트랜잭션에서 실행되며, 잔액이 부족하면 아무것도 변경되지 않습니다.
"""

from __future__ import annotations

import logging
from uuid import UUID

from apps.skyparty.application.catalog.ports import CatalogReader
from apps.skyparty.application.common.exceptions import (
    CharacterNotFoundError,
    UserNotFoundError,
)
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserCommandGateway, UserQueryGateway
from apps.skyparty.application.inventory.dto import PurchaseResult
from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.domain.entities import InventoryItem
from apps.skyparty.domain.enums import BalanceOperation, ItemSource, ItemType

logger = logging.getLogger(__name__)


class PurchaseCharacterCommand:
    """캐릭터 구매 Command.

    가격은 클라이언트 입력이 아닌 카탈로그 가격을 사용합니다.
    이미 보유한 캐릭터도 다시 구매할 수 있으며, 이 경우 인벤토리 행만 추가됩니다.
    """

    def __init__(
        self,
        catalog_reader: CatalogReader,
        user_query_gateway: UserQueryGateway,
        user_command_gateway: UserCommandGateway,
        inventory_gateway: InventoryGateway,
        ledger_service: LedgerService,
        transaction_manager: TransactionManager,
    ) -> None:
        self._catalog_reader = catalog_reader
        self._user_query_gateway = user_query_gateway
        self._user_command_gateway = user_command_gateway
        self._inventory_gateway = inventory_gateway
        self._ledger_service = ledger_service
        self._transaction_manager = transaction_manager

    async def execute(self, user_id: UUID, character_id: str) -> PurchaseResult:
        """Raises:
        UserNotFoundError: 사용자 없음
        CharacterNotFoundError: 카탈로그에 없거나 판매 중지된 캐릭터
        InsufficientFundsError: 잔액 부족
        """
        async with self._transaction_manager.begin():
            user = await self._user_query_gateway.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()

            character = await self._catalog_reader.get_by_id(character_id)
            if character is None or not character.is_active:
                raise CharacterNotFoundError(character_id)

            if character.price > 0:
                new_balance = await self._ledger_service.adjust_balance(
                    user_id, character.price, BalanceOperation.SUBTRACT
                )
            else:
                new_balance = user.game_credits

            await self._user_command_gateway.add_owned_character(user_id, character.id)
            await self._inventory_gateway.append(
                InventoryItem(
                    owner_id=user_id,
                    type=ItemType.CHARACTER.value,
                    character_id=character.id,
                    name=character.name,
                    icon=character.icon,
                    description=character.description,
                    price=character.price,
                    source=ItemSource.PURCHASE,
                )
            )

        owned = tuple(sorted(user.owned_characters | {character.id}))
        logger.info(
            "Character purchased",
            extra={
                "user_id": str(user_id),
                "character_id": character.id,
                "price": character.price,
            },
        )
        return PurchaseResult(
            character_id=character.id,
            new_balance=new_balance,
            owned_characters=owned,
        )
