"""Initial skyparty schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Schema: skyparty.*
"""

from typing import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create initial skyparty tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS skyparty")

    # users 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.users (
            id UUID PRIMARY KEY,
            username VARCHAR(64) NOT NULL UNIQUE,
            email VARCHAR(320) NOT NULL UNIQUE,
            password_hash TEXT NOT NULL DEFAULT '',
            game_credits INTEGER NOT NULL DEFAULT 0,
            current_character VARCHAR(64),
            activated BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            last_login_at TIMESTAMPTZ,
            CONSTRAINT ck_users_game_credits_non_negative CHECK (game_credits >= 0)
        )
    """)

    # user_owned_characters 테이블 - (user_id, character_id) 합집합
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.user_owned_characters (
            user_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            character_id VARCHAR(64) NOT NULL,
            acquired_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            PRIMARY KEY (user_id, character_id)
        )
    """)

    # characters 테이블 - 카탈로그
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.characters (
            id VARCHAR(64) PRIMARY KEY,
            name TEXT NOT NULL,
            icon TEXT NOT NULL DEFAULT '',
            description TEXT NOT NULL DEFAULT '',
            price INTEGER NOT NULL DEFAULT 0,
            rarity VARCHAR(32) NOT NULL DEFAULT 'common',
            category VARCHAR(32) NOT NULL DEFAULT 'character',
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TIMESTAMPTZ DEFAULT NOW(),
            CONSTRAINT ck_characters_price_non_negative CHECK (price >= 0)
        )
    """)

    # inventory_items 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.inventory_items (
            id UUID PRIMARY KEY,
            owner_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            type VARCHAR(32) NOT NULL,
            character_id VARCHAR(64),
            name TEXT NOT NULL,
            icon TEXT NOT NULL DEFAULT '',
            description TEXT NOT NULL DEFAULT '',
            price INTEGER NOT NULL DEFAULT 0,
            source VARCHAR(16) NOT NULL,
            acquired_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_inventory_items_owner_acquired
        ON skyparty.inventory_items(owner_id, acquired_at)
    """)

    # gifts 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.gifts (
            id UUID PRIMARY KEY,
            sender_id UUID NOT NULL REFERENCES skyparty.users(id),
            recipient_id UUID NOT NULL REFERENCES skyparty.users(id),
            item_type VARCHAR(16) NOT NULL,
            item_snapshot JSONB NOT NULL,
            message TEXT NOT NULL DEFAULT '',
            status VARCHAR(16) NOT NULL DEFAULT 'pending',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            claimed_at TIMESTAMPTZ
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_gifts_recipient_status
        ON skyparty.gifts(recipient_id, status)
    """)

    # credit_transactions 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.credit_transactions (
            id UUID PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            amount INTEGER NOT NULL,
            type VARCHAR(16) NOT NULL,
            balance_after INTEGER NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_credit_transactions_user_created
        ON skyparty.credit_transactions(user_id, created_at)
    """)


def downgrade() -> None:
    """Drop skyparty tables."""
    op.execute("DROP TABLE IF EXISTS skyparty.credit_transactions")
    op.execute("DROP TABLE IF EXISTS skyparty.gifts")
    op.execute("DROP TABLE IF EXISTS skyparty.inventory_items")
    op.execute("DROP TABLE IF EXISTS skyparty.characters")
    op.execute("DROP TABLE IF EXISTS skyparty.user_owned_characters")
    op.execute("DROP TABLE IF EXISTS skyparty.users")
