"""Domain Entity 및 정산 정책 테스트."""

from dataclasses import replace
from uuid import uuid4

import pytest

from apps.skyparty.domain.entities import Gift, InventoryItem
from apps.skyparty.domain.enums import (
    BalanceOperation,
    GiftItemType,
    GiftStatus,
    ItemSource,
    ItemType,
)
from apps.skyparty.domain.exceptions import (
    GiftAlreadyProcessedError,
    InvalidGiftTransitionError,
)
from apps.skyparty.domain.services import GiftSettlementService, SettlementPlan
from apps.skyparty.domain.value_objects import ItemSnapshot


def make_gift(item_type: GiftItemType = GiftItemType.CHARACTER, **snapshot) -> Gift:
    defaults = {"name": "Dragon", "icon": "🐉", "price": 500, "character_id": "dragon"}
    if item_type is GiftItemType.CREDITS:
        defaults = {"name": "Credits", "amount": 50}
    defaults.update(snapshot)
    return Gift(
        sender_id=uuid4(),
        recipient_id=uuid4(),
        item_type=item_type,
        item_snapshot=ItemSnapshot(**defaults),
    )


class TestGiftStateMachine:
    """pending → claimed | rejected, 단 한 번."""

    def test_new_gift_is_pending(self) -> None:
        gift = make_gift()
        assert gift.status is GiftStatus.PENDING
        assert gift.is_pending
        assert gift.claimed_at is None

    @pytest.mark.parametrize("target", [GiftStatus.CLAIMED, GiftStatus.REJECTED])
    def test_pending_can_settle(self, target: GiftStatus) -> None:
        make_gift().ensure_can_transition(target)

    @pytest.mark.parametrize("status", [GiftStatus.CLAIMED, GiftStatus.REJECTED])
    def test_terminal_gift_cannot_transition_again(self, status: GiftStatus) -> None:
        """종료 상태는 불변입니다 (claimed → rejected 불가)."""
        gift = replace(make_gift(), status=status)

        for target in (GiftStatus.CLAIMED, GiftStatus.REJECTED):
            with pytest.raises(GiftAlreadyProcessedError):
                gift.ensure_can_transition(target)

    def test_pending_to_pending_is_invalid(self) -> None:
        with pytest.raises(InvalidGiftTransitionError):
            make_gift().ensure_can_transition(GiftStatus.PENDING)

    @pytest.mark.parametrize("target", [GiftStatus.CLAIMED, GiftStatus.REJECTED])
    def test_settlement_only_leaves_pending(self, target: GiftStatus) -> None:
        assert Gift.transition_sources(target) == frozenset({GiftStatus.PENDING})

    def test_nothing_transitions_into_pending(self) -> None:
        with pytest.raises(InvalidGiftTransitionError):
            Gift.transition_sources(GiftStatus.PENDING)


class TestItemSnapshot:
    def test_dict_omits_absent_optionals(self) -> None:
        data = ItemSnapshot(name="Kitty", price=0).to_dict()
        assert "character_id" not in data
        assert "amount" not in data

    def test_from_dict_tolerates_missing_fields(self) -> None:
        snapshot = ItemSnapshot.from_dict({"name": "Credits", "amount": "50"})
        assert snapshot.amount == 50
        assert snapshot.icon == ""
        assert snapshot.character_id is None

    def test_blank_name_is_empty(self) -> None:
        assert ItemSnapshot(name="   ").is_empty


class TestBalanceOperation:
    def test_signed(self) -> None:
        assert BalanceOperation.ADD.signed(50) == 50
        assert BalanceOperation.SUBTRACT.signed(50) == -50


class TestInventoryItem:
    def test_from_character_snapshot(self) -> None:
        owner = uuid4()
        item = InventoryItem.from_snapshot(
            owner, ItemSnapshot(name="Dragon", character_id="dragon", price=500), ItemSource.GIFT
        )
        assert item.owner_id == owner
        assert item.type == ItemType.CHARACTER.value
        assert item.character_id == "dragon"
        assert item.source is ItemSource.GIFT

    def test_from_plain_snapshot_is_item_type(self) -> None:
        item = InventoryItem.from_snapshot(uuid4(), ItemSnapshot(name="Hat"), ItemSource.GIFT)
        assert item.type == ItemType.ITEM.value

    def test_each_item_gets_its_own_id(self) -> None:
        owner = uuid4()
        snapshot = ItemSnapshot(name="Dragon", character_id="dragon")
        first = InventoryItem.from_snapshot(owner, snapshot, ItemSource.GIFT)
        second = InventoryItem.from_snapshot(owner, snapshot, ItemSource.GIFT)
        assert first.id != second.id


class TestGiftSettlementService:
    """정산 계획 정책."""

    @pytest.fixture
    def service(self) -> GiftSettlementService:
        return GiftSettlementService()

    def test_claim_character_goes_to_recipient(self, service: GiftSettlementService) -> None:
        gift = make_gift()
        plan = service.plan(gift, GiftStatus.CLAIMED)

        assert plan.inventory_item is not None
        assert plan.inventory_item.owner_id == gift.recipient_id
        assert plan.inventory_item.source is ItemSource.GIFT
        assert plan.owned_character == (gift.recipient_id, "dragon")
        assert plan.credit_grant is None

    def test_claim_credits_grants_amount(self, service: GiftSettlementService) -> None:
        gift = make_gift(GiftItemType.CREDITS)
        plan = service.plan(gift, GiftStatus.CLAIMED)

        assert plan.credit_grant == (gift.recipient_id, 50)
        assert plan.inventory_item is None
        assert plan.owned_character is None

    def test_reject_character_returns_copy_to_sender(
        self, service: GiftSettlementService
    ) -> None:
        """거절된 캐릭터는 발신자 인벤토리에 returned 행으로 생성됩니다.

        보유 캐릭터 집합은 변경하지 않습니다.
        """
        gift = make_gift()
        plan = service.plan(gift, GiftStatus.REJECTED)

        assert plan.inventory_item is not None
        assert plan.inventory_item.owner_id == gift.sender_id
        assert plan.inventory_item.source is ItemSource.RETURNED
        assert plan.owned_character is None

    def test_reject_credits_has_no_effect(self, service: GiftSettlementService) -> None:
        plan = service.plan(make_gift(GiftItemType.CREDITS), GiftStatus.REJECTED)
        assert plan == SettlementPlan()

    def test_pending_outcome_has_no_effect(self, service: GiftSettlementService) -> None:
        assert service.plan(make_gift(), GiftStatus.PENDING) == SettlementPlan()
