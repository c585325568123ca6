"""Credits controller - 잔액 조정 및 거래 기록."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from apps.skyparty.application.ledger.commands import AdjustCreditsCommand
from apps.skyparty.application.ledger.dto import AdjustCreditsRequest
from apps.skyparty.application.ledger.queries import GetTransactionsQuery
from apps.skyparty.domain.exceptions import InsufficientFundsError
from apps.skyparty.infrastructure.observability.metrics import LEDGER_ADJUST_TOTAL
from apps.skyparty.presentation.http.auth import get_auth_user_id, require_internal_token
from apps.skyparty.presentation.http.schemas import (
    AdjustCreditsRequestSchema,
    AdjustCreditsResponse,
    TransactionListResponse,
    TransactionResponse,
)
from apps.skyparty.setup.dependencies import (
    get_adjust_credits_command,
    get_transactions_query,
)

router = APIRouter(tags=["credits"])


@router.post(
    "/internal/credits/adjust",
    response_model=AdjustCreditsResponse,
    dependencies=[Depends(require_internal_token)],
)
async def adjust_credits(
    body: AdjustCreditsRequestSchema,
    command: AdjustCreditsCommand = Depends(get_adjust_credits_command),
) -> AdjustCreditsResponse:
    """게임 서버 등 내부 호출용 잔액 조정.

    게이트웨이에서 외부로 노출되지 않습니다.
    internal_api_token이 설정되면 X-Internal-Token 헤더를 검사합니다.
    """
    operation = body.operation.value
    try:
        result = await command.execute(
            AdjustCreditsRequest(
                user_id=body.user_id,
                amount=body.amount,
                operation=body.operation,
            )
        )
    except InsufficientFundsError:
        LEDGER_ADJUST_TOTAL.labels(operation=operation, result="insufficient_funds").inc()
        raise
    LEDGER_ADJUST_TOTAL.labels(operation=operation, result="success").inc()
    return AdjustCreditsResponse(new_balance=result.new_balance)


@router.get("/credits/transactions", response_model=TransactionListResponse)
async def list_transactions(
    limit: int = Query(50, ge=1, le=200),
    auth_user_id: UUID = Depends(get_auth_user_id),
    query: GetTransactionsQuery = Depends(get_transactions_query),
) -> TransactionListResponse:
    """현재 사용자의 거래 기록을 최신순으로 조회합니다."""
    transactions = await query.execute(auth_user_id, limit=limit)
    return TransactionListResponse(
        transactions=[
            TransactionResponse(
                id=t.id,
                amount=t.amount,
                type=t.type.value,
                balance_after=t.balance_after,
                created_at=t.created_at,
            )
            for t in transactions
        ]
    )
