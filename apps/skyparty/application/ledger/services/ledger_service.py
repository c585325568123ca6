"""LedgerService.

단일 사용자의 잔액 변경을 담당합니다. 트랜잭션 경계는 호출하는 Command가 소유하며,
잔액 UPDATE와 거래 기록 INSERT가 같은 트랜잭션에 포함됩니다.
"""

from __future__ import annotations

import logging
from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError, ValidationError
from apps.skyparty.application.ledger.ports import LedgerGateway
from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.entities import CreditTransaction
from apps.skyparty.domain.enums import BalanceOperation
from apps.skyparty.domain.exceptions import InsufficientFundsError

logger = logging.getLogger(__name__)


class LedgerService:
    """크레딧 Ledger."""

    def __init__(self, gateway: LedgerGateway) -> None:
        self._gateway = gateway

    async def adjust_balance(
        self,
        user_id: UUID,
        amount: int,
        operation: BalanceOperation,
    ) -> int:
        """잔액을 변경하고 새 잔액을 반환합니다.

        subtract 금액이 잔액보다 크면 전체 요청을 거부합니다 (부분 차감 없음).

        Raises:
            ValidationError: amount가 양의 정수가 아님 또는 상한 초과
            UserNotFoundError: 사용자 없음
            InsufficientFundsError: 잔액 부족
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValidationError("Amount must be a positive integer")
        if amount > MAX_CREDIT_AMOUNT:
            raise ValidationError(f"Amount must not exceed {MAX_CREDIT_AMOUNT}")

        delta = operation.signed(amount)
        new_balance = await self._gateway.apply_delta(user_id, delta)

        if new_balance is None:
            balance = await self._gateway.get_balance(user_id)
            if balance is None:
                raise UserNotFoundError()
            logger.info(
                "Insufficient credits",
                extra={"user_id": str(user_id), "balance": balance, "amount": amount},
            )
            raise InsufficientFundsError(balance=balance, amount=amount)

        await self._gateway.record(
            CreditTransaction(
                user_id=user_id,
                amount=delta,
                type=operation,
                balance_after=new_balance,
            )
        )
        return new_balance
