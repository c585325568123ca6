"""Gift settlement Commands.

수령(claim)과 거절(reject)은 같은 흐름을 공유합니다.

Flow:
    1. compare-and-set 으로 pending → 종료 상태 전이 (승자 1명)
    2. 실패 시 원인 판별 (이미 처리됨 / 없음)
    3. 정산 계획 적용 (인벤토리, 보유 캐릭터, 크레딧)

전이와 정산은 하나의 트랜잭션에서 커밋되므로, 정산 중 실패하면 전이도 롤백됩니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import NoReturn
from uuid import UUID

from apps.skyparty.application.common.exceptions import GiftNotFoundError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserCommandGateway
from apps.skyparty.application.gift.dto import GiftView
from apps.skyparty.application.gift.ports import GiftGateway
from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.domain.entities import Gift
from apps.skyparty.domain.enums import BalanceOperation, GiftStatus
from apps.skyparty.domain.exceptions import GiftAlreadyProcessedError
from apps.skyparty.domain.services import GiftSettlementService, SettlementPlan

logger = logging.getLogger(__name__)


class _SettleGiftCommand:
    """선물 종료 처리 공통 로직."""

    outcome: GiftStatus

    def __init__(
        self,
        gift_gateway: GiftGateway,
        inventory_gateway: InventoryGateway,
        user_command_gateway: UserCommandGateway,
        ledger_service: LedgerService,
        transaction_manager: TransactionManager,
        settlement_service: GiftSettlementService | None = None,
    ) -> None:
        self._gift_gateway = gift_gateway
        self._inventory_gateway = inventory_gateway
        self._user_command_gateway = user_command_gateway
        self._ledger_service = ledger_service
        self._transaction_manager = transaction_manager
        self._settlement_service = settlement_service or GiftSettlementService()

    async def execute(self, gift_id: UUID, acting_user_id: UUID) -> GiftView:
        """Raises:
        GiftNotFoundError: 선물이 없거나 호출자에게 온 선물이 아님
        GiftAlreadyProcessedError: 이미 수령 또는 거절된 선물
        """
        sources = Gift.transition_sources(self.outcome)

        async with self._transaction_manager.begin():
            gift = await self._gift_gateway.transition(
                gift_id,
                acting_user_id,
                sources,
                self.outcome,
                datetime.now(timezone.utc),
            )
            if gift is None:
                await self._raise_transition_failure(gift_id, acting_user_id)

            plan = self._settlement_service.plan(gift, self.outcome)
            await self._apply(plan)

        logger.info(
            "Gift settled",
            extra={
                "gift_id": str(gift.id),
                "action": self.outcome.value,
                "item_type": gift.item_type.value,
                "recipient_id": str(gift.recipient_id),
                "sender_id": str(gift.sender_id),
            },
        )
        return GiftView.from_entity(gift)

    async def _raise_transition_failure(self, gift_id: UUID, acting_user_id: UUID) -> NoReturn:
        existing: Gift | None = await self._gift_gateway.get_for_recipient(
            gift_id, acting_user_id
        )
        if existing is None:
            raise GiftNotFoundError()
        existing.ensure_can_transition(self.outcome)
        # 조건부 UPDATE와 재조회 사이에 상태가 바뀐 경우
        raise GiftAlreadyProcessedError(str(gift_id))

    async def _apply(self, plan: SettlementPlan) -> None:
        if plan.inventory_item is not None:
            await self._inventory_gateway.append(plan.inventory_item)
        if plan.owned_character is not None:
            user_id, character_id = plan.owned_character
            await self._user_command_gateway.add_owned_character(user_id, character_id)
        if plan.credit_grant is not None:
            user_id, amount = plan.credit_grant
            await self._ledger_service.adjust_balance(user_id, amount, BalanceOperation.ADD)


class ClaimGiftCommand(_SettleGiftCommand):
    """선물 수령 Command."""

    outcome = GiftStatus.CLAIMED


class RejectGiftCommand(_SettleGiftCommand):
    """선물 거절 Command.

    캐릭터 선물은 발신자 인벤토리에 source=returned 행으로 돌아갑니다.
    """

    outcome = GiftStatus.REJECTED
