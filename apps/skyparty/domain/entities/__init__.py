"""Domain Entities."""

from apps.skyparty.domain.entities.character import Character
from apps.skyparty.domain.entities.conversation import Conversation, Message
from apps.skyparty.domain.entities.game_session import GameSession
from apps.skyparty.domain.entities.gift import Gift
from apps.skyparty.domain.entities.inventory_item import InventoryItem
from apps.skyparty.domain.entities.transaction import CreditTransaction
from apps.skyparty.domain.entities.user import User

__all__ = [
    "Character",
    "Conversation",
    "CreditTransaction",
    "GameSession",
    "Gift",
    "InventoryItem",
    "Message",
    "User",
]
