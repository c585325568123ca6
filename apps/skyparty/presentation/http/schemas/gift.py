"""Gift HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from apps.skyparty.application.gift.dto import GiftView
from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.value_objects import ItemSnapshot
from apps.skyparty.presentation.http.schemas.base import CamelModel


class ItemDataSchema(CamelModel):
    """선물 아이템 스냅샷."""

    name: str = ""
    icon: str = ""
    description: str = ""
    price: int = Field(0, ge=0, le=MAX_CREDIT_AMOUNT)
    character_id: str | None = None
    amount: int | None = Field(None, le=MAX_CREDIT_AMOUNT)

    def to_snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(
            name=self.name,
            icon=self.icon,
            description=self.description,
            price=self.price,
            character_id=self.character_id,
            amount=self.amount,
        )

    @classmethod
    def from_snapshot(cls, snapshot: ItemSnapshot) -> ItemDataSchema:
        return cls(
            name=snapshot.name,
            icon=snapshot.icon,
            description=snapshot.description,
            price=snapshot.price,
            character_id=snapshot.character_id,
            amount=snapshot.amount,
        )


class SendGiftRequestSchema(CamelModel):
    """선물 전송 요청 스키마."""

    recipient_id: UUID = Field(..., description="받는 사용자 ID")
    item_type: str = Field(..., description="character | credits")
    item_data: ItemDataSchema
    message: str = Field("", max_length=500)


class SendGiftResponse(CamelModel):
    success: bool = True
    gift_id: UUID
    created_at: datetime


class GiftResponse(CamelModel):
    """선물 스키마."""

    id: UUID
    sender_id: UUID
    recipient_id: UUID
    item_type: str
    message: str
    status: str
    created_at: datetime
    item_data: ItemDataSchema

    @classmethod
    def from_view(cls, view: GiftView) -> GiftResponse:
        return cls(
            id=view.id,
            sender_id=view.sender_id,
            recipient_id=view.recipient_id,
            item_type=view.item_type,
            message=view.message,
            status=view.status,
            created_at=view.created_at,
            item_data=ItemDataSchema.from_snapshot(view.item_snapshot),
        )


class PendingGiftsResponse(CamelModel):
    success: bool = True
    gifts: list[GiftResponse]


class GiftActionResponse(CamelModel):
    success: bool = True
    status: str
