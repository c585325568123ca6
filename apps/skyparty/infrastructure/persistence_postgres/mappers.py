"""Row <-> Domain Mappers.

컬럼 이름과 엔티티 필드가 만나는 유일한 위치입니다.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from apps.skyparty.domain.entities import (
    Character,
    Conversation,
    CreditTransaction,
    GameSession,
    Gift,
    InventoryItem,
    Message,
    User,
)
from apps.skyparty.domain.enums import (
    BalanceOperation,
    GiftItemType,
    GiftStatus,
    ItemSource,
)
from apps.skyparty.domain.value_objects import ItemSnapshot


def row_to_user(row: Mapping[str, Any], owned_characters: Iterable[str] = ()) -> User:
    """users 행과 보유 캐릭터 목록을 User 엔티티로 변환합니다."""
    return User(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        game_credits=row["game_credits"],
        current_character=row["current_character"],
        owned_characters=set(owned_characters),
        activated=row["activated"],
        created_at=row["created_at"],
        last_login_at=row["last_login_at"],
        activation_code=row["activation_code"],
        activated_at=row["activated_at"],
    )


def user_to_values(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "password_hash": user.password_hash,
        "game_credits": user.game_credits,
        "current_character": user.current_character,
        "activated": user.activated,
        "created_at": user.created_at,
        "last_login_at": user.last_login_at,
        "activation_code": user.activation_code,
        "activated_at": user.activated_at,
    }


def row_to_character(row: Mapping[str, Any]) -> Character:
    """characters 행을 Character 엔티티로 변환합니다."""
    return Character(
        id=row["id"],
        name=row["name"],
        icon=row["icon"],
        description=row["description"],
        price=row["price"],
        rarity=row["rarity"],
        category=row["category"],
        is_active=row["is_active"],
    )


def character_to_values(character: Character) -> dict[str, Any]:
    return {
        "id": character.id,
        "name": character.name,
        "icon": character.icon,
        "description": character.description,
        "price": character.price,
        "rarity": character.rarity,
        "category": character.category,
        "is_active": character.is_active,
    }


def row_to_inventory_item(row: Mapping[str, Any]) -> InventoryItem:
    """inventory_items 행을 InventoryItem 엔티티로 변환합니다."""
    return InventoryItem(
        id=row["id"],
        owner_id=row["owner_id"],
        type=row["type"],
        character_id=row["character_id"],
        name=row["name"],
        icon=row["icon"],
        description=row["description"],
        price=row["price"],
        source=ItemSource(row["source"]),
        acquired_at=row["acquired_at"],
    )


def inventory_item_to_values(item: InventoryItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "owner_id": item.owner_id,
        "type": item.type,
        "character_id": item.character_id,
        "name": item.name,
        "icon": item.icon,
        "description": item.description,
        "price": item.price,
        "source": item.source.value,
        "acquired_at": item.acquired_at,
    }


def row_to_gift(row: Mapping[str, Any]) -> Gift:
    """gifts 행을 Gift 엔티티로 변환합니다.

    item_snapshot 은 JSONB 컬럼에서 dict로 읽힙니다.
    """
    return Gift(
        id=row["id"],
        sender_id=row["sender_id"],
        recipient_id=row["recipient_id"],
        item_type=GiftItemType(row["item_type"]),
        item_snapshot=ItemSnapshot.from_dict(row["item_snapshot"] or {}),
        message=row["message"],
        status=GiftStatus(row["status"]),
        created_at=row["created_at"],
        claimed_at=row["claimed_at"],
    )


def gift_to_values(gift: Gift) -> dict[str, Any]:
    return {
        "id": gift.id,
        "sender_id": gift.sender_id,
        "recipient_id": gift.recipient_id,
        "item_type": gift.item_type.value,
        "item_snapshot": gift.item_snapshot.to_dict(),
        "message": gift.message,
        "status": gift.status.value,
        "created_at": gift.created_at,
        "claimed_at": gift.claimed_at,
    }


def row_to_transaction(row: Mapping[str, Any]) -> CreditTransaction:
    """credit_transactions 행을 CreditTransaction 엔티티로 변환합니다."""
    return CreditTransaction(
        id=row["id"],
        user_id=row["user_id"],
        amount=row["amount"],
        type=BalanceOperation(row["type"]),
        balance_after=row["balance_after"],
        created_at=row["created_at"],
    )


def transaction_to_values(transaction: CreditTransaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "user_id": transaction.user_id,
        "amount": transaction.amount,
        "type": transaction.type.value,
        "balance_after": transaction.balance_after,
        "created_at": transaction.created_at,
    }


def row_to_conversation(row: Mapping[str, Any]) -> Conversation:
    return Conversation(
        id=row["id"],
        participant1_id=row["participant1_id"],
        participant2_id=row["participant2_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def conversation_to_values(conversation: Conversation) -> dict[str, Any]:
    return {
        "id": conversation.id,
        "participant1_id": conversation.participant1_id,
        "participant2_id": conversation.participant2_id,
        "created_at": conversation.created_at,
        "updated_at": conversation.updated_at,
    }


def row_to_message(row: Mapping[str, Any]) -> Message:
    """messages 행을 Message 엔티티로 변환합니다 (read_status → read)."""
    return Message(
        id=row["id"],
        conversation_id=row["conversation_id"],
        sender_id=row["sender_id"],
        recipient_id=row["recipient_id"],
        content=row["content"],
        read=row["read_status"],
        created_at=row["created_at"],
    )


def message_to_values(message: Message) -> dict[str, Any]:
    return {
        "id": message.id,
        "conversation_id": message.conversation_id,
        "sender_id": message.sender_id,
        "recipient_id": message.recipient_id,
        "content": message.content,
        "read_status": message.read,
        "created_at": message.created_at,
    }


def game_session_to_values(session: GameSession) -> dict[str, Any]:
    return {
        "id": session.id,
        "user_id": session.user_id,
        "game_type": session.game_type,
        "earned_credits": session.earned_credits,
        "duration_seconds": session.duration_seconds,
        "played_at": session.played_at,
    }
