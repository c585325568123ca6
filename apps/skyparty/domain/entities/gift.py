"""Gift Entity.

두 사용자 사이의 선물 전달 상태 머신입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.skyparty.domain.enums import GiftItemType, GiftStatus
from apps.skyparty.domain.exceptions import (
    GiftAlreadyProcessedError,
    InvalidGiftTransitionError,
)
from apps.skyparty.domain.value_objects import ItemSnapshot

_ALLOWED_TRANSITIONS: dict[GiftStatus, frozenset[GiftStatus]] = {
    GiftStatus.PENDING: frozenset({GiftStatus.CLAIMED, GiftStatus.REJECTED}),
    GiftStatus.CLAIMED: frozenset(),
    GiftStatus.REJECTED: frozenset(),
}


@dataclass
class Gift:
    """선물 엔티티.

    Attributes:
        sender_id: 보낸 사용자 ID
        recipient_id: 받는 사용자 ID
        item_type: 선물 종류 (character | credits)
        item_snapshot: 전송 시점 아이템 스냅샷
        message: 동봉 메시지
        status: 상태
        id: 선물 ID
        created_at: 생성 시각
        claimed_at: 수령/거절 처리 시각
    """

    sender_id: UUID
    recipient_id: UUID
    item_type: GiftItemType
    item_snapshot: ItemSnapshot
    message: str = ""
    status: GiftStatus = GiftStatus.PENDING
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    claimed_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        """처리 대기 여부."""
        return self.status is GiftStatus.PENDING

    def ensure_can_transition(self, target: GiftStatus) -> None:
        """target 상태로 전이할 수 있는지 확인합니다.

        pending → claimed, pending → rejected 만 허용되며 각각 한 번만 가능합니다.

        Raises:
            GiftAlreadyProcessedError: 이미 종료 상태인 경우
            InvalidGiftTransitionError: 허용되지 않는 대상 상태인 경우
        """
        if self.status.is_terminal:
            raise GiftAlreadyProcessedError(str(self.id))
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidGiftTransitionError(self.status.value, target.value)

    @staticmethod
    def transition_sources(target: GiftStatus) -> frozenset[GiftStatus]:
        """target 상태로 전이할 수 있는 출발 상태 집합.

        compare-and-set UPDATE의 status 조건으로 사용됩니다.

        Raises:
            InvalidGiftTransitionError: 어떤 상태에서도 도달할 수 없는 경우
        """
        sources = frozenset(
            status for status, targets in _ALLOWED_TRANSITIONS.items() if target in targets
        )
        if not sources:
            raise InvalidGiftTransitionError("*", target.value)
        return sources

    def __hash__(self) -> int:
        return hash(self.id)
