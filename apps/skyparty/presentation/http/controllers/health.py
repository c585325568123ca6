"""Health controller - Health check endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.setup.dependencies import get_db_session

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """헬스체크 엔드포인트."""
    return {"status": "healthy", "service": "skyparty-api"}


@router.get("/ready")
async def ready(session: Annotated[AsyncSession, Depends(get_db_session)]) -> dict:
    """DB 연결 확인 후 준비 상태를 반환합니다."""
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}
