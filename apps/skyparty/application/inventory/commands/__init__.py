"""Inventory Commands."""

from apps.skyparty.application.inventory.commands.add_inventory_item import (
    AddInventoryItemCommand,
)
from apps.skyparty.application.inventory.commands.purchase_character import (
    PurchaseCharacterCommand,
)

__all__ = ["AddInventoryItemCommand", "PurchaseCharacterCommand"]
