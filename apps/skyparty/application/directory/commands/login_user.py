"""LoginCommand - email/비밀번호 로그인."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from apps.skyparty.application.common.exceptions import InvalidCredentialsError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.dto import LoginRequest, UserView
from apps.skyparty.application.directory.ports import (
    PasswordHasher,
    UserCommandGateway,
    UserQueryGateway,
)

logger = logging.getLogger(__name__)


class LoginCommand:
    """저장된 bcrypt 해시로 비밀번호를 검증하고 마지막 로그인 시각을 기록합니다.

    세션/토큰 발급은 게이트웨이 책임이며, 이 UseCase는 사용자 정보만 반환합니다.
    """

    def __init__(
        self,
        query_gateway: UserQueryGateway,
        command_gateway: UserCommandGateway,
        password_hasher: PasswordHasher,
        transaction_manager: TransactionManager,
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._password_hasher = password_hasher
        self._transaction_manager = transaction_manager

    async def execute(self, request: LoginRequest) -> UserView:
        """Raises:
        ValidationError: email 또는 비밀번호 누락
        InvalidCredentialsError: 사용자 없음 또는 비밀번호 불일치
        """
        email = request.email.strip().lower()
        if not email or not request.password:
            raise ValidationError("Email and password are required")

        async with self._transaction_manager.begin():
            user = await self._query_gateway.get_by_email(email)
            if user is None or not self._password_hasher.verify(
                request.password, user.password_hash
            ):
                raise InvalidCredentialsError()

            now = datetime.now(timezone.utc)
            await self._command_gateway.record_login(user.id, now)
            user.last_login_at = now

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return UserView.from_entity(user)
