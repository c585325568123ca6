"""Ledger HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.enums import BalanceOperation
from apps.skyparty.presentation.http.schemas.base import CamelModel


class AdjustCreditsRequestSchema(CamelModel):
    """잔액 조정 요청 스키마."""

    user_id: UUID = Field(..., description="대상 사용자 ID")
    amount: int = Field(..., gt=0, le=MAX_CREDIT_AMOUNT, description="양의 정수 금액")
    operation: BalanceOperation = Field(..., description="add | subtract")


class AdjustCreditsResponse(CamelModel):
    success: bool = True
    new_balance: int


class TransactionResponse(CamelModel):
    """거래 기록 스키마."""

    id: UUID
    amount: int
    type: str
    balance_after: int
    created_at: datetime


class TransactionListResponse(CamelModel):
    success: bool = True
    transactions: list[TransactionResponse]
