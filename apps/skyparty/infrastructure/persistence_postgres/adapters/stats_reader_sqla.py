"""SQLAlchemy implementation of stats reader."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.stats.dto import ServiceStats
from apps.skyparty.application.stats.ports import StatsReader
from apps.skyparty.domain.enums import GiftStatus
from apps.skyparty.infrastructure.persistence_postgres.tables import (
    credit_transactions_table,
    game_sessions_table,
    gifts_table,
    users_table,
)


class SqlaStatsReader(StatsReader):
    """운영 통계 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def collect(self, active_since: datetime) -> ServiceStats:
        users_row = (
            await self._session.execute(
                select(
                    func.count(),
                    func.count().filter(users_table.c.last_login_at >= active_since),
                    func.count().filter(users_table.c.activated.is_(True)),
                    func.coalesce(func.sum(users_table.c.game_credits), 0),
                ).select_from(users_table)
            )
        ).one()
        total_transactions = await self._session.scalar(
            select(func.count()).select_from(credit_transactions_table)
        )
        pending_gifts = await self._session.scalar(
            select(func.count())
            .select_from(gifts_table)
            .where(gifts_table.c.status == GiftStatus.PENDING.value)
        )
        total_game_sessions = await self._session.scalar(
            select(func.count()).select_from(game_sessions_table)
        )
        total_users, active_users, activated_users, credits = users_row
        return ServiceStats(
            total_users=total_users or 0,
            active_users=active_users or 0,
            activated_users=activated_users or 0,
            total_transactions=total_transactions or 0,
            pending_gifts=pending_gifts or 0,
            total_credits_in_circulation=int(credits or 0),
            total_game_sessions=total_game_sessions or 0,
        )
