"""SearchUsersQuery."""

from __future__ import annotations

from uuid import UUID

from apps.skyparty.application.directory.dto import UserView
from apps.skyparty.application.directory.ports import UserQueryGateway

MAX_RESULTS = 20


class SearchUsersQuery:
    """username 부분 일치 검색.

    선물/메시지 수신자 선택 화면에서 사용됩니다. 빈 검색어는 빈 목록을 반환합니다.
    """

    def __init__(self, query_gateway: UserQueryGateway) -> None:
        self._query_gateway = query_gateway

    async def execute(
        self,
        query: str | None,
        exclude_user_id: UUID | None = None,
    ) -> list[UserView]:
        """exclude_user_id(보통 호출자 본인)는 조회 단계에서 제외됩니다."""
        term = (query or "").strip()
        if not term:
            return []
        users = await self._query_gateway.search_by_username(
            term, limit=MAX_RESULTS, exclude_user_id=exclude_user_id
        )
        return [UserView.from_entity(u) for u in users]
