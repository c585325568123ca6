"""Gifts controller - 선물 전송, 대기 목록, 수령/거절."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.skyparty.application.gift.commands import (
    ClaimGiftCommand,
    RejectGiftCommand,
    SendGiftCommand,
)
from apps.skyparty.application.gift.dto import SendGiftRequest
from apps.skyparty.application.gift.queries import ListPendingGiftsQuery
from apps.skyparty.infrastructure.observability.metrics import (
    GIFT_SENT_TOTAL,
    GIFT_SETTLED_TOTAL,
)
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import (
    GiftActionResponse,
    GiftResponse,
    PendingGiftsResponse,
    SendGiftRequestSchema,
    SendGiftResponse,
)
from apps.skyparty.setup.dependencies import (
    get_claim_gift_command,
    get_list_pending_gifts_query,
    get_reject_gift_command,
    get_send_gift_command,
)

router = APIRouter(prefix="/gifts", tags=["gifts"])


@router.post("", response_model=SendGiftResponse, status_code=status.HTTP_201_CREATED)
async def send_gift(
    body: SendGiftRequestSchema,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: SendGiftCommand = Depends(get_send_gift_command),
) -> SendGiftResponse:
    """선물을 보냅니다. 발신자는 인증된 사용자입니다."""
    gift = await command.execute(
        SendGiftRequest(
            sender_id=auth_user_id,
            recipient_id=body.recipient_id,
            item_type=body.item_type,
            item_snapshot=body.item_data.to_snapshot(),
            message=body.message,
        )
    )
    GIFT_SENT_TOTAL.labels(item_type=gift.item_type).inc()
    return SendGiftResponse(gift_id=gift.id, created_at=gift.created_at)


@router.get("/pending", response_model=PendingGiftsResponse)
async def list_pending_gifts(
    auth_user_id: UUID = Depends(get_auth_user_id),
    query: ListPendingGiftsQuery = Depends(get_list_pending_gifts_query),
) -> PendingGiftsResponse:
    """처리 대기 중인 선물을 최신순으로 조회합니다."""
    gifts = await query.execute(auth_user_id)
    return PendingGiftsResponse(gifts=[GiftResponse.from_view(g) for g in gifts])


@router.post("/{gift_id}/claim", response_model=GiftActionResponse)
async def claim_gift(
    gift_id: UUID,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: ClaimGiftCommand = Depends(get_claim_gift_command),
) -> GiftActionResponse:
    gift = await command.execute(gift_id, auth_user_id)
    GIFT_SETTLED_TOTAL.labels(action="claim", item_type=gift.item_type).inc()
    return GiftActionResponse(status=gift.status)


@router.post("/{gift_id}/reject", response_model=GiftActionResponse)
async def reject_gift(
    gift_id: UUID,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: RejectGiftCommand = Depends(get_reject_gift_command),
) -> GiftActionResponse:
    gift = await command.execute(gift_id, auth_user_id)
    GIFT_SETTLED_TOTAL.labels(action="reject", item_type=gift.item_type).inc()
    return GiftActionResponse(status=gift.status)
