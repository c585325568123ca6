"""ListPendingGiftsQuery."""

from __future__ import annotations

from uuid import UUID

from apps.skyparty.application.gift.dto import GiftView
from apps.skyparty.application.gift.ports import GiftGateway


class ListPendingGiftsQuery:
    """수신자의 처리 대기 선물 조회 (최신순)."""

    def __init__(self, gift_gateway: GiftGateway) -> None:
        self._gift_gateway = gift_gateway

    async def execute(self, recipient_id: UUID) -> list[GiftView]:
        gifts = await self._gift_gateway.list_pending_for_recipient(recipient_id)
        return [GiftView.from_entity(gift) for gift in gifts]
