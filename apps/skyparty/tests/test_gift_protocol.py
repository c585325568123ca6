"""선물 프로토콜 시나리오 테스트 (인메모리 게이트웨이).

전송 → 수령/거절 → 정산까지 실제 Command 조합으로 검증합니다.
"""

import asyncio
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.skyparty.application.common.exceptions import GiftNotFoundError
from apps.skyparty.application.gift.commands import (
    ClaimGiftCommand,
    RejectGiftCommand,
    SendGiftCommand,
)
from apps.skyparty.application.gift.dto import SendGiftRequest
from apps.skyparty.application.gift.queries import ListPendingGiftsQuery
from apps.skyparty.domain.entities import User
from apps.skyparty.domain.enums import BalanceOperation, ItemSource
from apps.skyparty.domain.exceptions import GiftAlreadyProcessedError
from apps.skyparty.domain.value_objects import ItemSnapshot

pytestmark = pytest.mark.asyncio

DRAGON = ItemSnapshot(
    name="Dragon", icon="🐉", description="Legendary", price=500, character_id="dragon"
)


@pytest.fixture
def send(user_query, gift_gateway, tx) -> SendGiftCommand:
    return SendGiftCommand(user_query, gift_gateway, tx)


@pytest.fixture
def claim(gift_gateway, inventory_gateway, user_command, ledger_service, tx) -> ClaimGiftCommand:
    return ClaimGiftCommand(gift_gateway, inventory_gateway, user_command, ledger_service, tx)


@pytest.fixture
def reject(gift_gateway, inventory_gateway, user_command, ledger_service, tx) -> RejectGiftCommand:
    return RejectGiftCommand(gift_gateway, inventory_gateway, user_command, ledger_service, tx)


def credits(amount: int) -> ItemSnapshot:
    return ItemSnapshot(name=f"{amount} Credits", icon="💰", amount=amount)


class TestCreditGift:
    async def test_claim_grants_amount_without_debiting_sender(
        self, store, alice: User, bob: User, send, claim
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))

        await claim.execute(gift.id, bob.id)

        assert store.users[alice.id].game_credits == 150
        assert store.users[bob.id].game_credits == 200
        [grant] = store.transactions_of(bob.id)
        assert grant.amount == 50
        assert grant.type is BalanceOperation.ADD
        assert grant.balance_after == 200
        assert store.transactions_of(alice.id) == []

    async def test_reject_has_no_effect(
        self, store, alice: User, bob: User, send, reject
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))

        view = await reject.execute(gift.id, bob.id)

        assert view.status == "rejected"
        assert store.users[alice.id].game_credits == 150
        assert store.users[bob.id].game_credits == 150
        assert store.transactions == []


class TestCharacterGift:
    async def test_claim_adds_inventory_and_ownership(
        self, store, alice: User, bob: User, send, claim
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "character", DRAGON))

        await claim.execute(gift.id, bob.id)

        assert store.users[bob.id].owned_characters == {"kitty", "dragon"}
        [item] = store.inventory_of(bob.id)
        assert item.character_id == "dragon"
        assert item.source is ItemSource.GIFT
        assert item.price == 500
        assert store.users[alice.id].owned_characters == {"kitty"}

    async def test_reject_returns_copy_to_sender(
        self, store, alice: User, bob: User, send, reject
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "character", DRAGON))

        await reject.execute(gift.id, bob.id)

        assert store.inventory_of(bob.id) == []
        assert store.users[bob.id].owned_characters == {"kitty"}
        [returned] = store.inventory_of(alice.id)
        assert returned.source is ItemSource.RETURNED
        assert returned.name == "Dragon"
        # 거절은 보유 캐릭터 집합을 바꾸지 않습니다.
        assert store.users[alice.id].owned_characters == {"kitty"}

    async def test_snapshot_is_frozen_at_send_time(
        self, store, alice: User, bob: User, send, claim
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "character", DRAGON))
        store.characters["dragon"].price = 9999

        await claim.execute(gift.id, bob.id)

        [item] = store.inventory_of(bob.id)
        assert item.price == 500


class TestSingleSettlement:
    """선물은 정확히 한 번만 정산됩니다."""

    async def test_second_claim_is_rejected(
        self, store, alice: User, bob: User, send, claim, reject
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))
        await claim.execute(gift.id, bob.id)

        with pytest.raises(GiftAlreadyProcessedError):
            await claim.execute(gift.id, bob.id)
        with pytest.raises(GiftAlreadyProcessedError):
            await reject.execute(gift.id, bob.id)

        assert store.users[bob.id].game_credits == 200
        assert len(store.transactions_of(bob.id)) == 1

    async def test_concurrent_claims_settle_once(
        self, store, alice: User, bob: User, send, claim
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))

        results = await asyncio.gather(
            *(claim.execute(gift.id, bob.id) for _ in range(5)),
            return_exceptions=True,
        )

        succeeded = [r for r in results if not isinstance(r, Exception)]
        failed = [r for r in results if isinstance(r, Exception)]
        assert len(succeeded) == 1
        assert all(isinstance(r, GiftAlreadyProcessedError) for r in failed)
        assert store.users[bob.id].game_credits == 200
        assert len(store.transactions_of(bob.id)) == 1

    async def test_claim_and_reject_race(
        self, store, alice: User, bob: User, send, claim, reject
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "character", DRAGON))

        results = await asyncio.gather(
            claim.execute(gift.id, bob.id),
            reject.execute(gift.id, bob.id),
            return_exceptions=True,
        )

        assert sum(not isinstance(r, Exception) for r in results) == 1
        total_rows = len(store.inventory_of(bob.id)) + len(store.inventory_of(alice.id))
        assert total_rows == 1


class TestOwnership:
    async def test_only_recipient_can_settle(
        self, store, alice: User, bob: User, send, claim, reject
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))

        with pytest.raises(GiftNotFoundError):
            await claim.execute(gift.id, alice.id)
        with pytest.raises(GiftNotFoundError):
            await reject.execute(gift.id, alice.id)

        assert store.gifts[gift.id].is_pending

    async def test_unknown_gift(self, bob: User, claim) -> None:
        with pytest.raises(GiftNotFoundError):
            await claim.execute(uuid4(), bob.id)

    async def test_self_gift_is_allowed(self, store, alice: User, send, claim) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, alice.id, "credits", credits(10)))

        await claim.execute(gift.id, alice.id)

        assert store.users[alice.id].game_credits == 160


class TestPendingList:
    async def test_newest_first_and_settled_excluded(
        self, alice: User, bob: User, send, claim, gift_gateway
    ) -> None:
        first = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(1)))
        second = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(2)))
        third = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(3)))
        await claim.execute(second.id, bob.id)

        pending = await ListPendingGiftsQuery(gift_gateway).execute(bob.id)

        assert [g.id for g in pending] == [third.id, first.id]
        assert all(g.status == "pending" for g in pending)

    async def test_sender_sees_nothing(self, alice: User, bob: User, send, gift_gateway) -> None:
        await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(5)))

        assert await ListPendingGiftsQuery(gift_gateway).execute(alice.id) == []


class TestSettlementAtomicity:
    """정산 도중 실패하면 상태 전이도 함께 롤백됩니다."""

    async def test_inventory_failure_keeps_gift_pending(
        self, store, alice: User, bob: User, send, claim, inventory_gateway, tx, monkeypatch
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "character", DRAGON))
        monkeypatch.setattr(
            inventory_gateway, "append", AsyncMock(side_effect=RuntimeError("disk full"))
        )

        with pytest.raises(RuntimeError):
            await claim.execute(gift.id, bob.id)

        assert store.gifts[gift.id].is_pending
        assert store.gifts[gift.id].claimed_at is None
        assert store.inventory_of(bob.id) == []
        assert store.users[bob.id].owned_characters == {"kitty"}
        assert tx.rollbacks == 1

        monkeypatch.undo()
        view = await claim.execute(gift.id, bob.id)

        assert view.status == "claimed"
        assert [item.character_id for item in store.inventory_of(bob.id)] == ["dragon"]

    async def test_ledger_failure_keeps_gift_pending(
        self, store, alice: User, bob: User, send, claim, ledger_service, monkeypatch
    ) -> None:
        gift = await send.execute(SendGiftRequest(alice.id, bob.id, "credits", credits(50)))
        monkeypatch.setattr(
            ledger_service, "adjust_balance", AsyncMock(side_effect=RuntimeError("timeout"))
        )

        with pytest.raises(RuntimeError):
            await claim.execute(gift.id, bob.id)

        assert store.gifts[gift.id].is_pending
        assert store.transactions == []
        assert store.users[bob.id].game_credits == 150

        monkeypatch.undo()
        await claim.execute(gift.id, bob.id)

        assert store.users[bob.id].game_credits == 200
        assert len(store.transactions_of(bob.id)) == 1
