"""ActivateUserCommand - 활성화 코드로 계정 활성화."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from apps.skyparty.application.common.exceptions import (
    InvalidActivationCodeError,
    UserNotFoundError,
)
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.dto import ActivateUserRequest, UserView
from apps.skyparty.application.directory.ports import UserCommandGateway, UserQueryGateway

logger = logging.getLogger(__name__)


def normalize_activation_code(code: str) -> str:
    return code.strip().upper()


class ActivateUserCommand:
    """등록된 활성화 코드로 계정을 활성화합니다.

    코드는 대소문자와 앞뒤 공백을 무시하고 비교합니다.
    이미 활성화된 계정에 다시 요청하면 기존 상태를 그대로 반환합니다.
    """

    def __init__(
        self,
        query_gateway: UserQueryGateway,
        command_gateway: UserCommandGateway,
        transaction_manager: TransactionManager,
        valid_codes: Iterable[str],
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._transaction_manager = transaction_manager
        self._valid_codes = frozenset(normalize_activation_code(c) for c in valid_codes)

    async def execute(self, request: ActivateUserRequest) -> UserView:
        """Raises:
        InvalidActivationCodeError: 등록되지 않은 코드
        UserNotFoundError: 사용자 없음
        """
        code = normalize_activation_code(request.activation_code)
        if code not in self._valid_codes:
            raise InvalidActivationCodeError()

        async with self._transaction_manager.begin():
            user = await self._query_gateway.get_by_id(request.user_id)
            if user is None:
                raise UserNotFoundError()
            if user.activated:
                return UserView.from_entity(user)

            now = datetime.now(timezone.utc)
            if await self._command_gateway.activate(user.id, code, now):
                user.activated = True
                user.activation_code = code
                user.activated_at = now
            else:
                # 동시 요청이 먼저 활성화한 경우
                user = await self._query_gateway.get_by_id(request.user_id) or user

        logger.info("User activated", extra={"user_id": str(user.id)})
        return UserView.from_entity(user)
