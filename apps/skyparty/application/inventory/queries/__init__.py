"""Inventory Queries."""

from apps.skyparty.application.inventory.queries.list_inventory import ListInventoryQuery

__all__ = ["ListInventoryQuery"]
