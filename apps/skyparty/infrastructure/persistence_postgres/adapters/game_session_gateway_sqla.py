"""SQLAlchemy implementation of game session gateway."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.game.ports import GameSessionGateway
from apps.skyparty.domain.entities import GameSession
from apps.skyparty.infrastructure.persistence_postgres.mappers import game_session_to_values
from apps.skyparty.infrastructure.persistence_postgres.tables import game_sessions_table


class SqlaGameSessionGateway(GameSessionGateway):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def record(self, session: GameSession) -> None:
        await self._session.execute(
            game_sessions_table.insert().values(**game_session_to_values(session))
        )
