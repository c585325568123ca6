"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현.

    세션의 autobegin 트랜잭션을 그대로 사용하며, begin() 블록 종료 시점에
    커밋 또는 롤백합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """블록이 정상 종료되면 커밋, 예외가 발생하면 롤백 후 다시 던집니다."""
        try:
            yield
        except Exception:
            await self._session.rollback()
            raise
        else:
            await self._session.commit()

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        await self._session.commit()

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
