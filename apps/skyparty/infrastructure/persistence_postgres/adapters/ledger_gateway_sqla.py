"""SQLAlchemy implementation of ledger gateway."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.ledger.ports import LedgerGateway
from apps.skyparty.domain.entities import CreditTransaction
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    row_to_transaction,
    transaction_to_values,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import (
    credit_transactions_table,
    users_table,
)


class SqlaLedgerGateway(LedgerGateway):
    """Ledger 게이트웨이 SQLAlchemy 구현.

    잔액 변경은 조건부 UPDATE ... RETURNING 한 번으로 처리합니다.
    동시 요청은 행 잠금으로 직렬화되고, 대기 후 WHERE 조건이 다시 평가되므로
    잔액이 음수가 되는 경우가 없습니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_balance(self, user_id: UUID) -> int | None:
        result = await self._session.execute(
            select(users_table.c.game_credits).where(users_table.c.id == user_id)
        )
        return result.scalar_one_or_none()

    async def apply_delta(self, user_id: UUID, delta: int) -> int | None:
        new_balance = users_table.c.game_credits + delta
        result = await self._session.execute(
            update(users_table)
            .where(users_table.c.id == user_id, new_balance >= 0)
            .values(game_credits=new_balance)
            .returning(users_table.c.game_credits)
        )
        return result.scalar_one_or_none()

    async def record(self, transaction: CreditTransaction) -> None:
        await self._session.execute(
            credit_transactions_table.insert().values(**transaction_to_values(transaction))
        )

    async def list_by_user(self, user_id: UUID, limit: int = 50) -> Sequence[CreditTransaction]:
        result = await self._session.execute(
            select(credit_transactions_table)
            .where(credit_transactions_table.c.user_id == user_id)
            .order_by(
                credit_transactions_table.c.created_at.desc(),
                credit_transactions_table.c.id,
            )
            .limit(limit)
        )
        return [row_to_transaction(row) for row in result.mappings().all()]
