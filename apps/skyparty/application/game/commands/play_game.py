"""PlayGameCommand - 미니게임 보상 지급."""

from __future__ import annotations

import logging

from apps.skyparty.application.common.exceptions import UserNotFoundError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.game.dto import PlayGameRequest, PlayGameResult
from apps.skyparty.application.game.ports import GameSessionGateway
from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.domain.entities import GameSession
from apps.skyparty.domain.enums import BalanceOperation

logger = logging.getLogger(__name__)

DEFAULT_MAX_REWARD = 1000
MAX_GAME_TYPE_LENGTH = 64


class PlayGameCommand:
    """미니게임 결과를 받아 보상을 지급하고 플레이를 기록합니다.

    보상 지급은 LedgerService를 거치므로 잔액 변경과 거래 기록이 함께 남습니다.
    보상이 0이면 Ledger를 호출하지 않고 플레이 기록만 추가합니다.
    """

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        ledger_service: LedgerService,
        game_session_gateway: GameSessionGateway,
        transaction_manager: TransactionManager,
        max_reward: int = DEFAULT_MAX_REWARD,
    ) -> None:
        self._user_gateway = user_gateway
        self._ledger_service = ledger_service
        self._game_session_gateway = game_session_gateway
        self._transaction_manager = transaction_manager
        self._max_reward = max_reward

    async def execute(self, request: PlayGameRequest) -> PlayGameResult:
        """Raises:
        ValidationError: 게임 종류 누락, 보상 범위 초과, 음수 플레이 시간
        UserNotFoundError: 사용자 없음
        """
        game_type = request.game_type.strip()
        earned = request.earned_credits
        if not game_type or len(game_type) > MAX_GAME_TYPE_LENGTH:
            raise ValidationError("Game type is required")
        if isinstance(earned, bool) or not isinstance(earned, int):
            raise ValidationError("Earned credits must be an integer")
        if not 0 <= earned <= self._max_reward:
            raise ValidationError(f"Earned credits must be between 0 and {self._max_reward}")
        if request.duration_seconds is not None and request.duration_seconds < 0:
            raise ValidationError("Duration must not be negative")

        async with self._transaction_manager.begin():
            user = await self._user_gateway.get_by_id(request.user_id)
            if user is None:
                raise UserNotFoundError()

            if earned > 0:
                new_balance = await self._ledger_service.adjust_balance(
                    user.id, earned, BalanceOperation.ADD
                )
            else:
                new_balance = user.game_credits

            session = GameSession(
                user_id=user.id,
                game_type=game_type,
                earned_credits=earned,
                duration_seconds=request.duration_seconds,
            )
            await self._game_session_gateway.record(session)

        logger.info(
            "Game played",
            extra={
                "user_id": str(user.id),
                "game_type": game_type,
                "earned_credits": earned,
            },
        )
        return PlayGameResult(
            session_id=session.id,
            earned_credits=earned,
            new_balance=new_balance,
        )
