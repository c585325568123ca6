"""Inventory Domain Enums."""

from enum import Enum


class ItemSource(str, Enum):
    """인벤토리 아이템 획득 경로."""

    PURCHASE = "purchase"
    GIFT = "gift"
    RETURNED = "returned"
    DEFAULT = "default"


class ItemType(str, Enum):
    """인벤토리 아이템 종류."""

    CHARACTER = "character"
    ITEM = "item"
