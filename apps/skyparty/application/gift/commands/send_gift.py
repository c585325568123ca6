"""SendGiftCommand - 선물 전송 UseCase."""

from __future__ import annotations

import logging

from apps.skyparty.application.common.exceptions import InvalidPartyError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.ports import UserQueryGateway
from apps.skyparty.application.gift.dto import GiftView, SendGiftRequest
from apps.skyparty.application.gift.ports import GiftGateway
from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.entities import Gift
from apps.skyparty.domain.enums import GiftItemType
from apps.skyparty.domain.value_objects import ItemSnapshot

logger = logging.getLogger(__name__)


class SendGiftCommand:
    """선물 전송 Command.

    발신자의 잔액이나 인벤토리는 전송 시점에 차감하지 않습니다.
    수령 시 수신자에게 스냅샷의 사본이 지급됩니다.
    """

    def __init__(
        self,
        user_gateway: UserQueryGateway,
        gift_gateway: GiftGateway,
        transaction_manager: TransactionManager,
    ) -> None:
        self._user_gateway = user_gateway
        self._gift_gateway = gift_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: SendGiftRequest) -> GiftView:
        """pending 선물을 생성합니다.

        Raises:
            ValidationError: 알 수 없는 item_type 또는 잘못된 스냅샷
            InvalidPartyError: 발신자 또는 수신자 없음
        """
        item_type = self._parse_item_type(request.item_type)
        self._validate_snapshot(item_type, request.item_snapshot)

        async with self._transaction_manager.begin():
            if not await self._user_gateway.exists(request.sender_id):
                raise InvalidPartyError()
            if not await self._user_gateway.exists(request.recipient_id):
                raise InvalidPartyError()

            gift = await self._gift_gateway.create(
                Gift(
                    sender_id=request.sender_id,
                    recipient_id=request.recipient_id,
                    item_type=item_type,
                    item_snapshot=request.item_snapshot,
                    message=request.message,
                )
            )

        logger.info(
            "Gift sent",
            extra={
                "gift_id": str(gift.id),
                "sender_id": str(gift.sender_id),
                "recipient_id": str(gift.recipient_id),
                "item_type": gift.item_type.value,
            },
        )
        return GiftView.from_entity(gift)

    @staticmethod
    def _parse_item_type(value: str) -> GiftItemType:
        try:
            return GiftItemType(value)
        except ValueError:
            raise ValidationError(f"Unsupported gift type: {value}") from None

    @staticmethod
    def _validate_snapshot(item_type: GiftItemType, snapshot: ItemSnapshot) -> None:
        if snapshot.is_empty:
            raise ValidationError("Gift item name is required")
        if snapshot.price < 0:
            raise ValidationError("Price must not be negative")
        if snapshot.price > MAX_CREDIT_AMOUNT:
            raise ValidationError(f"Price must not exceed {MAX_CREDIT_AMOUNT}")
        if item_type is GiftItemType.CHARACTER and not snapshot.character_id:
            raise ValidationError("Character gifts require characterId")
        if item_type is GiftItemType.CREDITS:
            amount = snapshot.amount
            if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
                raise ValidationError("Credit gifts require a positive amount")
            if amount > MAX_CREDIT_AMOUNT:
                raise ValidationError(f"Amount must not exceed {MAX_CREDIT_AMOUNT}")
