"""Ledger DTOs."""

from dataclasses import dataclass
from uuid import UUID

from apps.skyparty.domain.enums import BalanceOperation


@dataclass(frozen=True, slots=True)
class AdjustCreditsRequest:
    """잔액 조정 요청.

    Attributes:
        user_id: 사용자 ID
        amount: 양의 정수 금액
        operation: add | subtract
    """

    user_id: UUID
    amount: int
    operation: BalanceOperation


@dataclass(frozen=True, slots=True)
class AdjustCreditsResult:
    """잔액 조정 결과."""

    user_id: UUID
    new_balance: int
