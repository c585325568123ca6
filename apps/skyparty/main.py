"""SkyParty API - FastAPI application entry point.

게임 크레딧 Ledger, 캐릭터 카탈로그/인벤토리, 사용자 간 선물 전달을 제공합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.skyparty.application.catalog.commands import SeedCatalogCommand
from apps.skyparty.infrastructure.cache import get_catalog_cache
from apps.skyparty.infrastructure.observability.metrics import register_metrics
from apps.skyparty.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters import (
    SqlaCatalogReader,
    SqlaCatalogWriter,
    SqlaTransactionManager,
)
from apps.skyparty.infrastructure.persistence_postgres.catalog_seed import load_catalog
from apps.skyparty.presentation.http.controllers import (
    admin_router,
    characters_router,
    credits_router,
    games_router,
    gifts_router,
    health_router,
    inventory_router,
    messages_router,
    users_router,
)
from apps.skyparty.presentation.http.errors import register_exception_handlers
from apps.skyparty.setup.config import get_settings
from apps.skyparty.setup.database import async_session_factory, engine
from apps.skyparty.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


async def seed_catalog() -> None:
    """기본 카탈로그 시드 (ID가 없는 행만 추가)."""
    characters = load_catalog()
    async with async_session_factory() as session:
        command = SeedCatalogCommand(SqlaCatalogWriter(session), SqlaTransactionManager(session))
        await command.execute(characters)


async def warmup_local_cache() -> None:
    """로컬 캐시 워밍업 (DB에서 판매 중인 캐릭터 로드)."""
    try:
        cache = get_catalog_cache()

        # 이미 초기화되어 있으면 스킵
        if cache.is_initialized:
            logger.info("Local cache already initialized, skipping warmup")
            return

        async with async_session_factory() as session:
            characters = await SqlaCatalogReader(session).list_active()

        if characters:
            cache.set_all(characters)
            logger.info("Local cache warmup completed", extra={"count": len(characters)})
        else:
            logger.warning("Local cache warmup: no characters found in database")

    except Exception as e:
        logger.warning(
            "Local cache warmup failed (graceful degradation)",
            extra={"error": str(e)},
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 수명주기 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    if settings.otel_enabled:
        setup_tracing(
            settings.app_name,
            settings.otel_exporter_otlp_endpoint,
            environment=settings.environment,
            sampling_rate=settings.otel_sampling_rate,
        )
        instrument_sqlalchemy(engine)

    if not settings.internal_api_token and settings.environment not in ("development", "local"):
        logger.warning("internal_api_token is not set; /internal routes rely on gateway isolation")

    if settings.seed_catalog_on_startup:
        await seed_catalog()

    await warmup_local_cache()

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await engine.dispose()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="SkyParty API",
        description="게임 크레딧, 캐릭터 인벤토리, 선물 전달, 메시지 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)
    register_metrics(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ready (prefix 없음)
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(credits_router, prefix="/api/v1")
    app.include_router(characters_router, prefix="/api/v1")
    app.include_router(inventory_router, prefix="/api/v1")
    app.include_router(gifts_router, prefix="/api/v1")
    app.include_router(messages_router, prefix="/api/v1")
    app.include_router(games_router, prefix="/api/v1")
    app.include_router(admin_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.skyparty.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
