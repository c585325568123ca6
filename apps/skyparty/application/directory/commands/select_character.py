"""SelectCharacterCommand - 현재 캐릭터 선택."""

from __future__ import annotations

from uuid import UUID

from apps.skyparty.application.common.exceptions import UserNotFoundError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserCommandGateway, UserQueryGateway
from apps.skyparty.domain.exceptions import CharacterNotOwnedError


class SelectCharacterCommand:
    """보유한 캐릭터 중 하나를 현재 캐릭터로 지정합니다."""

    def __init__(
        self,
        query_gateway: UserQueryGateway,
        command_gateway: UserCommandGateway,
        transaction_manager: TransactionManager,
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, user_id: UUID, character_id: str) -> str:
        """현재 캐릭터를 변경하고 선택된 캐릭터 ID를 반환합니다.

        Raises:
            UserNotFoundError: 사용자 없음
            CharacterNotOwnedError: 보유하지 않은 캐릭터
        """
        async with self._transaction_manager.begin():
            user = await self._query_gateway.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()
            if not user.owns_character(character_id):
                raise CharacterNotOwnedError(character_id)
            await self._command_gateway.set_current_character(user_id, character_id)
        return character_id
