"""Inventory HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.presentation.http.schemas.base import CamelModel


class InventoryItemResponse(CamelModel):
    """인벤토리 아이템 스키마."""

    id: UUID
    type: str
    character_id: str | None = None
    name: str
    icon: str = ""
    description: str = ""
    price: int = 0
    source: str
    acquired_at: datetime


class InventoryListResponse(CamelModel):
    success: bool = True
    items: list[InventoryItemResponse]


class InventoryItemPayload(CamelModel):
    """추가할 아이템."""

    type: str = Field(..., description="아이템 종류")
    character_id: str | None = None
    name: str = Field(..., description="아이템 이름")
    icon: str = ""
    description: str = ""
    price: int = Field(0, ge=0, le=MAX_CREDIT_AMOUNT)


class AddInventoryItemRequestSchema(CamelModel):
    item: InventoryItemPayload


class AddInventoryItemResponse(CamelModel):
    success: bool = True
    item_id: UUID
