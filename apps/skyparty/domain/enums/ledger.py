"""Ledger Domain Enums."""

from enum import Enum


class BalanceOperation(str, Enum):
    """잔액 변경 연산."""

    ADD = "add"
    SUBTRACT = "subtract"

    def signed(self, amount: int) -> int:
        """거래 기록용 부호 있는 금액을 반환합니다."""
        return amount if self is BalanceOperation.ADD else -amount
