"""Alembic Environment Configuration for SkyParty.

- asyncpg 드라이버로 온라인 마이그레이션 실행
- 환경변수에서 DB URL 로드
- autogenerate 지원 (tables 메타데이터)

Usage:
    cd migrations/skyparty
    alembic upgrade head
    alembic downgrade -1
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

# 프로젝트 루트를 path에 추가 (tables import용)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, PROJECT_ROOT)

from apps.skyparty.infrastructure.persistence_postgres.constants import (  # noqa: E402
    SKYPARTY_SCHEMA,
)
from apps.skyparty.infrastructure.persistence_postgres.tables import metadata  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata


def get_url() -> str:
    """DB URL 반환 (환경변수 우선, asyncpg 드라이버로 정규화)."""
    url = os.getenv("SKYPARTY_DATABASE_URL") or config.get_main_option("sqlalchemy.url")
    if not url:
        from apps.skyparty.setup.config import get_settings

        url = get_settings().database_url
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def run_migrations_offline() -> None:
    """오프라인 모드에서 마이그레이션 실행.

    DB 연결 없이 SQL만 생성합니다.
    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_schemas=True,
        version_table_schema=SKYPARTY_SCHEMA,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_schemas=True,
        version_table_schema=SKYPARTY_SCHEMA,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """온라인 모드에서 마이그레이션 실행."""
    connectable = create_async_engine(get_url(), poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        # version 테이블이 스키마 안에 생성되므로 먼저 스키마를 만듭니다.
        await connection.exec_driver_sql(f"CREATE SCHEMA IF NOT EXISTS {SKYPARTY_SCHEMA}")
        await connection.commit()
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
