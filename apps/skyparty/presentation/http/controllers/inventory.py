"""Inventory controller."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.skyparty.application.inventory.commands import AddInventoryItemCommand
from apps.skyparty.application.inventory.dto import AddInventoryItemRequest
from apps.skyparty.application.inventory.queries import ListInventoryQuery
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import (
    AddInventoryItemRequestSchema,
    AddInventoryItemResponse,
    InventoryItemResponse,
    InventoryListResponse,
)
from apps.skyparty.setup.dependencies import (
    get_add_inventory_item_command,
    get_list_inventory_query,
)

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("", response_model=InventoryListResponse)
async def list_inventory(
    auth_user_id: UUID = Depends(get_auth_user_id),
    query: ListInventoryQuery = Depends(get_list_inventory_query),
) -> InventoryListResponse:
    """현재 사용자의 인벤토리를 최신순으로 조회합니다."""
    items = await query.execute(auth_user_id)
    return InventoryListResponse(
        items=[
            InventoryItemResponse(
                id=i.id,
                type=i.type,
                character_id=i.character_id,
                name=i.name,
                icon=i.icon,
                description=i.description,
                price=i.price,
                source=i.source,
                acquired_at=i.acquired_at,
            )
            for i in items
        ]
    )


@router.post("", response_model=AddInventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def add_inventory_item(
    body: AddInventoryItemRequestSchema,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: AddInventoryItemCommand = Depends(get_add_inventory_item_command),
) -> AddInventoryItemResponse:
    item = body.item
    item_id = await command.execute(
        AddInventoryItemRequest(
            owner_id=auth_user_id,
            type=item.type,
            name=item.name,
            character_id=item.character_id,
            icon=item.icon,
            description=item.description,
            price=item.price,
        )
    )
    return AddInventoryItemResponse(item_id=item_id)
