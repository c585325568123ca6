"""Messaging, game sessions, activation columns, BIGINT balances.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

Schema: skyparty.*
"""

from typing import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: str | None = "0001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Widen balances and add messaging / game / activation storage."""
    # 누적 잔액은 단일 금액 상한(INTEGER)을 넘을 수 있습니다.
    op.execute("ALTER TABLE skyparty.users ALTER COLUMN game_credits TYPE BIGINT")
    op.execute(
        "ALTER TABLE skyparty.credit_transactions ALTER COLUMN balance_after TYPE BIGINT"
    )

    op.execute("""
        ALTER TABLE skyparty.users
            ADD COLUMN IF NOT EXISTS activation_code VARCHAR(32),
            ADD COLUMN IF NOT EXISTS activated_at TIMESTAMPTZ
    """)

    # conversations 테이블 - id는 정렬된 참여자 ID 쌍
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.conversations (
            id VARCHAR(80) PRIMARY KEY,
            participant1_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            participant2_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_conversations_participant1
        ON skyparty.conversations(participant1_id)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_conversations_participant2
        ON skyparty.conversations(participant2_id)
    """)

    # messages 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.messages (
            id UUID PRIMARY KEY,
            conversation_id VARCHAR(80) NOT NULL
                REFERENCES skyparty.conversations(id) ON DELETE CASCADE,
            sender_id UUID NOT NULL,
            recipient_id UUID NOT NULL,
            content TEXT NOT NULL,
            read_status BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_messages_conversation_created
        ON skyparty.messages(conversation_id, created_at)
    """)

    # game_sessions 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS skyparty.game_sessions (
            id UUID PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES skyparty.users(id) ON DELETE CASCADE,
            game_type VARCHAR(64) NOT NULL,
            earned_credits INTEGER NOT NULL,
            duration_seconds INTEGER,
            played_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_game_sessions_earned_non_negative CHECK (earned_credits >= 0)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_game_sessions_user_played
        ON skyparty.game_sessions(user_id, played_at)
    """)


def downgrade() -> None:
    """Drop messaging / game storage and restore INTEGER balances."""
    op.execute("DROP TABLE IF EXISTS skyparty.game_sessions")
    op.execute("DROP TABLE IF EXISTS skyparty.messages")
    op.execute("DROP TABLE IF EXISTS skyparty.conversations")
    op.execute("""
        ALTER TABLE skyparty.users
            DROP COLUMN IF EXISTS activated_at,
            DROP COLUMN IF EXISTS activation_code
    """)
    op.execute(
        "ALTER TABLE skyparty.credit_transactions ALTER COLUMN balance_after TYPE INTEGER"
    )
    op.execute("ALTER TABLE skyparty.users ALTER COLUMN game_credits TYPE INTEGER")
