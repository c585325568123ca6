"""Ledger Gateway Port."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from apps.skyparty.domain.entities import CreditTransaction


class LedgerGateway(ABC):
    """잔액 변경 및 거래 기록 포트."""

    @abstractmethod
    async def get_balance(self, user_id: UUID) -> int | None:
        """현재 잔액을 조회합니다. 사용자가 없으면 None."""
        ...

    @abstractmethod
    async def apply_delta(self, user_id: UUID, delta: int) -> int | None:
        """잔액에 delta를 원자적으로 더합니다.

        결과 잔액이 음수가 되는 경우 적용하지 않습니다.
        읽기-계산-쓰기를 애플리케이션에서 나눠 수행하지 않고
        단일 조건부 UPDATE로 처리해야 합니다.

        Returns:
            변경 후 잔액, 적용되지 않았으면 None (사용자 없음 또는 잔액 부족)
        """
        ...

    @abstractmethod
    async def record(self, transaction: CreditTransaction) -> None:
        """거래 기록을 추가합니다."""
        ...

    @abstractmethod
    async def list_by_user(self, user_id: UUID, limit: int = 50) -> Sequence[CreditTransaction]:
        """사용자 거래 기록을 최신순으로 조회합니다."""
        ...
