"""Inventory DTOs."""

from apps.skyparty.application.inventory.dto.inventory import (
    AddInventoryItemRequest,
    InventoryItemView,
    PurchaseResult,
)

__all__ = ["AddInventoryItemRequest", "InventoryItemView", "PurchaseResult"]
