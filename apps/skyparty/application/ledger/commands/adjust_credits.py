"""AdjustCreditsCommand."""

from __future__ import annotations

from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.ledger.dto import AdjustCreditsRequest, AdjustCreditsResult
from apps.skyparty.application.ledger.services import LedgerService


class AdjustCreditsCommand:
    """잔액 조정 Command.

    게임 보상 지급, 관리자 조정 등 내부 호출에서 사용됩니다.
    """

    def __init__(
        self,
        ledger_service: LedgerService,
        transaction_manager: TransactionManager,
    ) -> None:
        self._ledger_service = ledger_service
        self._transaction_manager = transaction_manager

    async def execute(self, request: AdjustCreditsRequest) -> AdjustCreditsResult:
        async with self._transaction_manager.begin():
            new_balance = await self._ledger_service.adjust_balance(
                request.user_id,
                request.amount,
                request.operation,
            )
        return AdjustCreditsResult(user_id=request.user_id, new_balance=new_balance)
