"""Inventory Ports."""

from apps.skyparty.application.inventory.ports.inventory_gateway import InventoryGateway

__all__ = ["InventoryGateway"]
