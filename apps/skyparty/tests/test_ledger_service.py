"""LedgerService 단위 테스트."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.skyparty.application.common.exceptions import UserNotFoundError, ValidationError
from apps.skyparty.application.ledger.commands import AdjustCreditsCommand
from apps.skyparty.application.ledger.dto import AdjustCreditsRequest
from apps.skyparty.application.ledger.queries import GetTransactionsQuery
from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.domain.enums import BalanceOperation
from apps.skyparty.domain.exceptions import InsufficientFundsError
from apps.skyparty.tests.fakes import FakeLedgerGateway, FakeTransactionManager, InMemoryStore

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """LedgerGateway mock."""
    gateway = AsyncMock()
    gateway.apply_delta = AsyncMock(return_value=200)
    gateway.get_balance = AsyncMock(return_value=150)
    gateway.record = AsyncMock()
    return gateway


class TestAdjustBalance:
    """adjust_balance 테스트.

    검증 포인트:
    1. 부호 있는 delta로 원자적 변경 요청
    2. 성공 시 거래 기록 1건
    3. 실패 원인 구분 (사용자 없음 / 잔액 부족)
    """

    async def test_add_applies_positive_delta_and_records(self, mock_gateway: AsyncMock) -> None:
        user_id = uuid4()
        service = LedgerService(mock_gateway)

        new_balance = await service.adjust_balance(user_id, 50, BalanceOperation.ADD)

        assert new_balance == 200
        mock_gateway.apply_delta.assert_awaited_once_with(user_id, 50)
        tx = mock_gateway.record.await_args.args[0]
        assert tx.user_id == user_id
        assert tx.amount == 50
        assert tx.type is BalanceOperation.ADD
        assert tx.balance_after == 200

    async def test_subtract_records_negative_amount(self, mock_gateway: AsyncMock) -> None:
        mock_gateway.apply_delta.return_value = 100
        service = LedgerService(mock_gateway)

        await service.adjust_balance(uuid4(), 50, BalanceOperation.SUBTRACT)

        mock_gateway.apply_delta.assert_awaited_once()
        assert mock_gateway.apply_delta.await_args.args[1] == -50
        assert mock_gateway.record.await_args.args[0].amount == -50

    async def test_insufficient_funds_records_nothing(self, mock_gateway: AsyncMock) -> None:
        """잔액보다 큰 차감은 전체 거부됩니다 (부분 차감 없음)."""
        mock_gateway.apply_delta.return_value = None
        mock_gateway.get_balance.return_value = 30
        service = LedgerService(mock_gateway)

        with pytest.raises(InsufficientFundsError) as exc_info:
            await service.adjust_balance(uuid4(), 50, BalanceOperation.SUBTRACT)

        assert exc_info.value.balance == 30
        assert exc_info.value.message == "Insufficient credits"
        mock_gateway.record.assert_not_awaited()

    async def test_unknown_user(self, mock_gateway: AsyncMock) -> None:
        mock_gateway.apply_delta.return_value = None
        mock_gateway.get_balance.return_value = None
        service = LedgerService(mock_gateway)

        with pytest.raises(UserNotFoundError):
            await service.adjust_balance(uuid4(), 10, BalanceOperation.ADD)

    @pytest.mark.parametrize("amount", [0, -5, True, 2.5, "10"])
    async def test_rejects_non_positive_integer(self, mock_gateway: AsyncMock, amount) -> None:
        service = LedgerService(mock_gateway)

        with pytest.raises(ValidationError):
            await service.adjust_balance(uuid4(), amount, BalanceOperation.ADD)

        mock_gateway.apply_delta.assert_not_awaited()

    @pytest.mark.parametrize("amount", [2**31, 2**40])
    async def test_rejects_amount_beyond_integer_column(
        self, mock_gateway: AsyncMock, amount: int
    ) -> None:
        """정수 컬럼 범위를 넘는 금액은 저장 전에 거부됩니다."""
        service = LedgerService(mock_gateway)

        with pytest.raises(ValidationError):
            await service.adjust_balance(uuid4(), amount, BalanceOperation.ADD)

        mock_gateway.apply_delta.assert_not_awaited()
        mock_gateway.record.assert_not_awaited()

    async def test_accepts_largest_single_amount(self, mock_gateway: AsyncMock) -> None:
        service = LedgerService(mock_gateway)

        await service.adjust_balance(uuid4(), 2**31 - 1, BalanceOperation.ADD)

        mock_gateway.apply_delta.assert_awaited_once()


class TestAdjustCreditsCommand:
    """인메모리 Ledger로 트랜잭션 경계를 검증합니다."""

    async def test_balance_never_goes_negative(self, store: InMemoryStore, alice) -> None:
        tx = FakeTransactionManager(store)
        command = AdjustCreditsCommand(LedgerService(FakeLedgerGateway(store)), tx)

        with pytest.raises(InsufficientFundsError):
            await command.execute(
                AdjustCreditsRequest(alice.id, 151, BalanceOperation.SUBTRACT)
            )

        assert store.users[alice.id].game_credits == 150
        assert store.transactions_of(alice.id) == []
        assert tx.rollbacks == 1

    async def test_exact_balance_can_be_spent(self, store: InMemoryStore, alice) -> None:
        command = AdjustCreditsCommand(
            LedgerService(FakeLedgerGateway(store)), FakeTransactionManager(store)
        )

        result = await command.execute(
            AdjustCreditsRequest(alice.id, 150, BalanceOperation.SUBTRACT)
        )

        assert result.new_balance == 0
        [tx] = store.transactions_of(alice.id)
        assert tx.balance_after == 0

    async def test_transactions_listed_newest_first(self, store: InMemoryStore, alice) -> None:
        gateway = FakeLedgerGateway(store)
        command = AdjustCreditsCommand(LedgerService(gateway), FakeTransactionManager(store))
        await command.execute(AdjustCreditsRequest(alice.id, 10, BalanceOperation.ADD))
        await command.execute(AdjustCreditsRequest(alice.id, 20, BalanceOperation.SUBTRACT))

        transactions = await GetTransactionsQuery(gateway).execute(alice.id)

        assert [t.amount for t in transactions] == [-20, 10]
        assert [t.balance_after for t in transactions] == [140, 160]

    async def test_transactions_for_unknown_user(self, store: InMemoryStore) -> None:
        with pytest.raises(UserNotFoundError):
            await GetTransactionsQuery(FakeLedgerGateway(store)).execute(uuid4())
