"""Gift settlement domain service.

선물 수령/거절 시 적용할 효과(인벤토리 추가, 보유 캐릭터 추가, 크레딧 지급)를 계산합니다.
실제 저장은 애플리케이션 계층이 하나의 트랜잭션 안에서 수행합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from apps.skyparty.domain.entities import Gift, InventoryItem
from apps.skyparty.domain.enums import GiftItemType, GiftStatus, ItemSource


@dataclass(frozen=True, slots=True)
class SettlementPlan:
    """정산 계획.

    Attributes:
        inventory_item: 추가할 인벤토리 행
        owned_character: (user_id, character_id) 보유 캐릭터 합집합 대상
        credit_grant: (user_id, amount) 크레딧 지급 대상
    """

    inventory_item: InventoryItem | None = None
    owned_character: tuple[UUID, str] | None = None
    credit_grant: tuple[UUID, int] | None = None


class GiftSettlementService:
    """선물 정산 정책.

    정책:
    - 수령(character): 수신자 인벤토리에 source=gift 행 추가 + 보유 캐릭터 합집합
    - 수령(credits): 수신자에게 스냅샷 amount 만큼 지급
    - 거절(character): 발신자 인벤토리에 source=returned 행 추가 (복사본)
    - 거절(credits): 효과 없음

    발신자는 전송 시점에 차감되지 않으므로 수령 시 사본이 생성됩니다.
    """

    def plan(self, gift: Gift, outcome: GiftStatus) -> SettlementPlan:
        """종료 상태에 따른 정산 계획을 반환합니다."""
        if outcome is GiftStatus.CLAIMED:
            return self._plan_claim(gift)
        if outcome is GiftStatus.REJECTED:
            return self._plan_reject(gift)
        return SettlementPlan()

    def _plan_claim(self, gift: Gift) -> SettlementPlan:
        snapshot = gift.item_snapshot
        if gift.item_type is GiftItemType.CHARACTER:
            owned = (gift.recipient_id, snapshot.character_id) if snapshot.character_id else None
            return SettlementPlan(
                inventory_item=InventoryItem.from_snapshot(
                    gift.recipient_id, snapshot, ItemSource.GIFT
                ),
                owned_character=owned,
            )
        if gift.item_type is GiftItemType.CREDITS and snapshot.amount:
            return SettlementPlan(credit_grant=(gift.recipient_id, snapshot.amount))
        return SettlementPlan()

    def _plan_reject(self, gift: Gift) -> SettlementPlan:
        if gift.item_type is GiftItemType.CHARACTER:
            return SettlementPlan(
                inventory_item=InventoryItem.from_snapshot(
                    gift.sender_id, gift.item_snapshot, ItemSource.RETURNED
                ),
            )
        return SettlementPlan()
