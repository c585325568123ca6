"""GetUserQuery."""

from __future__ import annotations

from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError
from apps.skyparty.application.directory.dto import UserView
from apps.skyparty.application.directory.ports import UserQueryGateway


class GetUserQuery:
    """사용자 단건 조회."""

    def __init__(self, query_gateway: UserQueryGateway) -> None:
        self._query_gateway = query_gateway

    async def execute(self, user_id: UUID) -> UserView:
        user = await self._query_gateway.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return UserView.from_entity(user)
