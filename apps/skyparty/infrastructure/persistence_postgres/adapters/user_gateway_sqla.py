"""SQLAlchemy implementation of user gateways."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import exists, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.common.exceptions import DuplicateUserError
from apps.skyparty.application.directory.ports import UserCommandGateway, UserQueryGateway
from apps.skyparty.domain.entities import User
from apps.skyparty.infrastructure.persistence_postgres.mappers import (
    row_to_user,
    user_to_values,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import (
    user_owned_characters_table,
    users_table,
)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlaUserQueryGateway(UserQueryGateway):
    """사용자 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self._get_one(users_table.c.id == user_id)

    async def get_by_username(self, username: str) -> User | None:
        return await self._get_one(users_table.c.username == username)

    async def get_by_email(self, email: str) -> User | None:
        return await self._get_one(users_table.c.email == email)

    async def exists(self, user_id: UUID) -> bool:
        result = await self._session.execute(
            select(exists().where(users_table.c.id == user_id))
        )
        return bool(result.scalar())

    async def get_usernames(self, user_ids: Sequence[UUID]) -> dict[UUID, str]:
        if not user_ids:
            return {}
        result = await self._session.execute(
            select(users_table.c.id, users_table.c.username).where(
                users_table.c.id.in_(list(user_ids))
            )
        )
        return {user_id: username for user_id, username in result.all()}

    async def search_by_username(
        self,
        query: str,
        limit: int = 20,
        exclude_user_id: UUID | None = None,
    ) -> Sequence[User]:
        stmt = select(users_table).where(
            users_table.c.username.ilike(f"%{_escape_like(query)}%", escape="\\")
        )
        if exclude_user_id is not None:
            stmt = stmt.where(users_table.c.id != exclude_user_id)
        result = await self._session.execute(
            stmt.order_by(users_table.c.username).limit(limit)
        )
        rows = result.mappings().all()
        owned = await self._load_owned([row["id"] for row in rows])
        return [row_to_user(row, owned.get(row["id"], ())) for row in rows]

    async def _get_one(self, condition) -> User | None:
        result = await self._session.execute(select(users_table).where(condition))
        row = result.mappings().one_or_none()
        if row is None:
            return None
        owned = await self._load_owned([row["id"]])
        return row_to_user(row, owned.get(row["id"], ()))

    async def _load_owned(self, user_ids: list[UUID]) -> dict[UUID, list[str]]:
        """여러 사용자의 보유 캐릭터를 한 번에 조회합니다."""
        if not user_ids:
            return {}
        result = await self._session.execute(
            select(
                user_owned_characters_table.c.user_id,
                user_owned_characters_table.c.character_id,
            ).where(user_owned_characters_table.c.user_id.in_(user_ids))
        )
        owned: dict[UUID, list[str]] = defaultdict(list)
        for user_id, character_id in result.all():
            owned[user_id].append(character_id)
        return owned


class SqlaUserCommandGateway(UserCommandGateway):
    """사용자 변경 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> User:
        """사용자 행과 보유 캐릭터 행을 추가합니다.

        동시 가입으로 UNIQUE 제약이 위반되면 DuplicateUserError로 변환합니다.
        """
        try:
            await self._session.execute(users_table.insert().values(**user_to_values(user)))
        except IntegrityError as exc:
            field = "username" if "username" in str(exc.orig) else "email"
            raise DuplicateUserError(field) from exc

        for character_id in sorted(user.owned_characters):
            await self.add_owned_character(user.id, character_id)
        return user

    async def add_owned_character(self, user_id: UUID, character_id: str) -> bool:
        stmt = (
            pg_insert(user_owned_characters_table)
            .values(user_id=user_id, character_id=character_id)
            .on_conflict_do_nothing(index_elements=["user_id", "character_id"])
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def set_current_character(self, user_id: UUID, character_id: str) -> bool:
        result = await self._session.execute(
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(current_character=character_id)
        )
        return result.rowcount > 0

    async def record_login(self, user_id: UUID, at: datetime) -> bool:
        result = await self._session.execute(
            update(users_table).where(users_table.c.id == user_id).values(last_login_at=at)
        )
        return result.rowcount > 0

    async def activate(self, user_id: UUID, activation_code: str, at: datetime) -> bool:
        """activated = false인 행만 갱신합니다."""
        result = await self._session.execute(
            update(users_table)
            .where(users_table.c.id == user_id, users_table.c.activated.is_(False))
            .values(activated=True, activation_code=activation_code, activated_at=at)
        )
        return result.rowcount > 0
