"""Table Definitions.

SkyParty 서비스의 SQLAlchemy Table 정의.
ORM 매핑 없이 순수 테이블 스키마만 정의하며, 엔티티 변환은 mappers 모듈이 담당합니다.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from apps.skyparty.infrastructure.persistence_postgres.constants import (
    CHARACTERS_TABLE,
    CONVERSATIONS_TABLE,
    CREDIT_TRANSACTIONS_TABLE,
    GAME_SESSIONS_TABLE,
    GIFTS_TABLE,
    INVENTORY_ITEMS_TABLE,
    MESSAGES_TABLE,
    SKYPARTY_SCHEMA,
    USER_OWNED_CHARACTERS_TABLE,
    USERS_TABLE,
)

metadata = MetaData(schema=SKYPARTY_SCHEMA)

# skyparty.users 테이블
users_table = Table(
    USERS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False, server_default=""),
    Column("game_credits", BigInteger, nullable=False, server_default="0"),
    Column("current_character", String(64), nullable=True),
    Column("activated", Boolean, nullable=False, server_default="false"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("last_login_at", DateTime(timezone=True), nullable=True),
    Column("activation_code", String(32), nullable=True),
    Column("activated_at", DateTime(timezone=True), nullable=True),
    CheckConstraint("game_credits >= 0", name="ck_users_game_credits_non_negative"),
)

# skyparty.user_owned_characters 테이블 - User.owned_characters 집합
user_owned_characters_table = Table(
    USER_OWNED_CHARACTERS_TABLE,
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("character_id", String(64), primary_key=True),
    Column("acquired_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

# skyparty.characters 테이블 - 카탈로그
characters_table = Table(
    CHARACTERS_TABLE,
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", Text, nullable=False),
    Column("icon", Text, nullable=False, server_default=""),
    Column("description", Text, nullable=False, server_default=""),
    Column("price", Integer, nullable=False, server_default="0"),
    Column("rarity", String(32), nullable=False, server_default="common"),
    Column("category", String(32), nullable=False, server_default="character"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    CheckConstraint("price >= 0", name="ck_characters_price_non_negative"),
)

# skyparty.inventory_items 테이블
inventory_items_table = Table(
    INVENTORY_ITEMS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(32), nullable=False),
    Column("character_id", String(64), nullable=True),
    Column("name", Text, nullable=False),
    Column("icon", Text, nullable=False, server_default=""),
    Column("description", Text, nullable=False, server_default=""),
    Column("price", Integer, nullable=False, server_default="0"),
    Column("source", String(16), nullable=False),
    Column("acquired_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_inventory_items_owner_acquired", "owner_id", "acquired_at"),
)

# skyparty.gifts 테이블
gifts_table = Table(
    GIFTS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "sender_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id"),
        nullable=False,
    ),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id"),
        nullable=False,
    ),
    Column("item_type", String(16), nullable=False),
    Column("item_snapshot", JSONB, nullable=False),
    Column("message", Text, nullable=False, server_default=""),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("claimed_at", DateTime(timezone=True), nullable=True),
    Index("ix_gifts_recipient_status", "recipient_id", "status"),
)

# skyparty.credit_transactions 테이블
credit_transactions_table = Table(
    CREDIT_TRANSACTIONS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("amount", Integer, nullable=False),
    Column("type", String(16), nullable=False),
    Column("balance_after", BigInteger, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_credit_transactions_user_created", "user_id", "created_at"),
)

# skyparty.conversations 테이블 - 두 사용자 사이의 1:1 대화
# id는 두 참여자 ID를 정렬해 이어 붙인 값이므로 같은 쌍에 대해 항상 같습니다.
conversations_table = Table(
    CONVERSATIONS_TABLE,
    metadata,
    Column("id", String(80), primary_key=True),
    Column(
        "participant1_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "participant2_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_conversations_participant1", "participant1_id"),
    Index("ix_conversations_participant2", "participant2_id"),
)

# skyparty.messages 테이블
messages_table = Table(
    MESSAGES_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "conversation_id",
        String(80),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{CONVERSATIONS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("sender_id", UUID(as_uuid=True), nullable=False),
    Column("recipient_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column("read_status", Boolean, nullable=False, server_default="false"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_messages_conversation_created", "conversation_id", "created_at"),
)

# skyparty.game_sessions 테이블 - 미니게임 플레이 기록
game_sessions_table = Table(
    GAME_SESSIONS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey(f"{SKYPARTY_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("game_type", String(64), nullable=False),
    Column("earned_credits", Integer, nullable=False),
    Column("duration_seconds", Integer, nullable=True),
    Column("played_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    CheckConstraint("earned_credits >= 0", name="ck_game_sessions_earned_non_negative"),
    Index("ix_game_sessions_user_played", "user_id", "played_at"),
)
