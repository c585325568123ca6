"""Database schema and table constants.

PostgreSQL 스키마 및 테이블 관련 상수들을 정의합니다.
"""

# =============================================================================
# Schema Names
# =============================================================================
SKYPARTY_SCHEMA = "skyparty"

# =============================================================================
# Table Names (skyparty schema)
# =============================================================================
USERS_TABLE = "users"
USER_OWNED_CHARACTERS_TABLE = "user_owned_characters"
CHARACTERS_TABLE = "characters"
INVENTORY_ITEMS_TABLE = "inventory_items"
GIFTS_TABLE = "gifts"
CREDIT_TRANSACTIONS_TABLE = "credit_transactions"
CONVERSATIONS_TABLE = "conversations"
MESSAGES_TABLE = "messages"
GAME_SESSIONS_TABLE = "game_sessions"
