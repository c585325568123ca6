"""Gift DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.skyparty.domain.entities import Gift
from apps.skyparty.domain.value_objects import ItemSnapshot


@dataclass(frozen=True, slots=True)
class SendGiftRequest:
    """선물 전송 요청.

    Attributes:
        sender_id: 보내는 사용자 ID (인증된 사용자)
        recipient_id: 받는 사용자 ID
        item_type: character | credits
        item_snapshot: 아이템 스냅샷
        message: 동봉 메시지
    """

    sender_id: UUID
    recipient_id: UUID
    item_type: str
    item_snapshot: ItemSnapshot
    message: str = ""


@dataclass(frozen=True, slots=True)
class GiftView:
    """선물 조회 결과."""

    id: UUID
    sender_id: UUID
    recipient_id: UUID
    item_type: str
    item_snapshot: ItemSnapshot
    message: str
    status: str
    created_at: datetime
    claimed_at: datetime | None

    @classmethod
    def from_entity(cls, gift: Gift) -> GiftView:
        return cls(
            id=gift.id,
            sender_id=gift.sender_id,
            recipient_id=gift.recipient_id,
            item_type=gift.item_type.value,
            item_snapshot=gift.item_snapshot,
            message=gift.message,
            status=gift.status.value,
            created_at=gift.created_at,
            claimed_at=gift.claimed_at,
        )
