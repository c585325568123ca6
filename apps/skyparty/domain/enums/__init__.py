"""Domain Enums."""

from apps.skyparty.domain.enums.gift import GiftItemType, GiftStatus
from apps.skyparty.domain.enums.inventory import ItemSource, ItemType
from apps.skyparty.domain.enums.ledger import BalanceOperation

__all__ = [
    "BalanceOperation",
    "GiftItemType",
    "GiftStatus",
    "ItemSource",
    "ItemType",
]
