"""GetTransactionsQuery."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError
from apps.skyparty.application.ledger.ports import LedgerGateway
from apps.skyparty.domain.entities import CreditTransaction

DEFAULT_LIMIT = 50


class GetTransactionsQuery:
    """사용자 거래 기록 조회 (최신순)."""

    def __init__(self, gateway: LedgerGateway) -> None:
        self._gateway = gateway

    async def execute(self, user_id: UUID, limit: int = DEFAULT_LIMIT) -> Sequence[CreditTransaction]:
        if await self._gateway.get_balance(user_id) is None:
            raise UserNotFoundError()
        return await self._gateway.list_by_user(user_id, limit=limit)
