"""미니게임 보상, 로그인, 계정 활성화, 검색 제외 테스트."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.skyparty.application.common.exceptions import (
    InvalidActivationCodeError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from apps.skyparty.application.directory.commands import (
    ActivateUserCommand,
    LoginCommand,
    RegisterUserCommand,
)
from apps.skyparty.application.directory.dto import (
    ActivateUserRequest,
    LoginRequest,
    RegisterUserRequest,
)
from apps.skyparty.application.directory.queries import SearchUsersQuery
from apps.skyparty.application.directory.queries.search_users import MAX_RESULTS
from apps.skyparty.application.game.commands import PlayGameCommand
from apps.skyparty.application.game.dto import PlayGameRequest
from apps.skyparty.application.stats.queries import GetStatsQuery
from apps.skyparty.domain.entities import User
from apps.skyparty.domain.enums import BalanceOperation
from apps.skyparty.infrastructure.security import BcryptPasswordHasher
from apps.skyparty.tests.fakes import FakeStatsReader

pytestmark = pytest.mark.asyncio

CODES = ["SKYP-ARTY-2024-GOLD", "TEST-CODE-ABCD-1234"]


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def play(user_query, ledger_service, game_session_gateway, tx) -> PlayGameCommand:
    return PlayGameCommand(user_query, ledger_service, game_session_gateway, tx, max_reward=100)


@pytest.fixture
def login(user_query, user_command, hasher, tx) -> LoginCommand:
    return LoginCommand(user_query, user_command, hasher, tx)


@pytest.fixture
def activate(user_query, user_command, tx) -> ActivateUserCommand:
    return ActivateUserCommand(user_query, user_command, tx, valid_codes=CODES)


@pytest.fixture
def dave(store, hasher) -> User:
    return store.add_user(
        User(
            id=uuid4(),
            username="dave",
            email="dave@example.com",
            password_hash=hasher.hash("s3cret"),
            game_credits=10,
        )
    )


class TestPlayGame:
    """미니게임 보상.

    검증 포인트:
    1. 보상은 Ledger를 거쳐 지급 (거래 기록 포함)
    2. 플레이 기록은 보상과 같은 트랜잭션
    3. 보상 0은 Ledger 호출 없이 기록만
    """

    async def test_reward_is_credited_through_ledger(self, store, alice: User, play) -> None:
        result = await play.execute(PlayGameRequest(alice.id, "balloon-pop", 40, 95))

        assert result.earned_credits == 40
        assert result.new_balance == 190
        assert store.users[alice.id].game_credits == 190
        [tx] = store.transactions_of(alice.id)
        assert tx.type is BalanceOperation.ADD
        assert tx.amount == 40
        [session] = store.game_sessions
        assert session.id == result.session_id
        assert session.game_type == "balloon-pop"
        assert session.duration_seconds == 95

    async def test_zero_reward_records_session_only(self, store, alice: User, play) -> None:
        result = await play.execute(PlayGameRequest(alice.id, "memory", 0))

        assert result.new_balance == 150
        assert store.transactions_of(alice.id) == []
        assert len(store.game_sessions) == 1

    @pytest.mark.parametrize(
        ("game_type", "earned", "duration"),
        [
            ("", 10, None),
            ("   ", 10, None),
            ("memory", -1, None),
            ("memory", 101, None),
            ("memory", True, None),
            ("memory", 10, -5),
        ],
    )
    async def test_invalid_report(
        self, store, alice: User, play, game_type: str, earned, duration
    ) -> None:
        with pytest.raises(ValidationError):
            await play.execute(PlayGameRequest(alice.id, game_type, earned, duration))

        assert store.game_sessions == []
        assert store.users[alice.id].game_credits == 150

    async def test_unknown_user(self, store, play) -> None:
        with pytest.raises(UserNotFoundError):
            await play.execute(PlayGameRequest(uuid4(), "memory", 10))

        assert store.game_sessions == []

    async def test_session_failure_rolls_back_reward(
        self, store, alice: User, play, game_session_gateway, tx, monkeypatch
    ) -> None:
        monkeypatch.setattr(
            game_session_gateway, "record", AsyncMock(side_effect=RuntimeError("disk full"))
        )

        with pytest.raises(RuntimeError):
            await play.execute(PlayGameRequest(alice.id, "memory", 30))

        assert store.users[alice.id].game_credits == 150
        assert store.transactions_of(alice.id) == []
        assert tx.rollbacks == 1


class TestLogin:
    async def test_valid_credentials_record_login(self, store, dave: User, login) -> None:
        before = datetime.now(timezone.utc)

        view = await login.execute(LoginRequest(" Dave@Example.com ", "s3cret"))

        assert view.id == dave.id
        assert view.last_login_at is not None
        assert view.last_login_at >= before
        assert store.users[dave.id].last_login_at == view.last_login_at

    async def test_wrong_password(self, store, dave: User, login) -> None:
        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest("dave@example.com", "wrong"))

        assert store.users[dave.id].last_login_at is None

    async def test_unknown_email(self, dave: User, login) -> None:
        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest("nobody@example.com", "s3cret"))

    async def test_account_without_password_cannot_log_in(self, alice: User, login) -> None:
        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest("alice@example.com", "anything"))

    async def test_registered_user_can_log_in(
        self, user_query, user_command, inventory_gateway, catalog_reader, hasher, tx, login
    ) -> None:
        register = RegisterUserCommand(
            user_query, user_command, inventory_gateway, catalog_reader, hasher, tx
        )
        registered = await register.execute(
            RegisterUserRequest("erin", "erin@example.com", "hunter2")
        )

        view = await login.execute(LoginRequest("erin@example.com", "hunter2"))

        assert view.id == registered.id


class TestActivateUser:
    async def test_valid_code_activates(self, store, alice: User, activate) -> None:
        view = await activate.execute(ActivateUserRequest(alice.id, " skyp-arty-2024-gold "))

        assert view.activated is True
        assert view.activated_at is not None
        stored = store.users[alice.id]
        assert stored.activated is True
        assert stored.activation_code == "SKYP-ARTY-2024-GOLD"

    async def test_invalid_code(self, store, alice: User, activate) -> None:
        with pytest.raises(InvalidActivationCodeError):
            await activate.execute(ActivateUserRequest(alice.id, "NOPE-NOPE-NOPE-NOPE"))

        assert store.users[alice.id].activated is False

    async def test_unknown_user(self, store, activate) -> None:
        with pytest.raises(UserNotFoundError):
            await activate.execute(ActivateUserRequest(uuid4(), CODES[0]))

    async def test_second_activation_keeps_first_code(self, store, alice: User, activate) -> None:
        first = await activate.execute(ActivateUserRequest(alice.id, CODES[0]))
        second = await activate.execute(ActivateUserRequest(alice.id, CODES[1]))

        assert second.activated_at == first.activated_at
        assert store.users[alice.id].activation_code == CODES[0]


class TestStatsCounters:
    async def test_active_activated_and_game_sessions(
        self, store, alice: User, bob: User, dave: User, login, activate, play
    ) -> None:
        store.users[bob.id].last_login_at = datetime.now(timezone.utc) - timedelta(days=30)
        await login.execute(LoginRequest("dave@example.com", "s3cret"))
        await activate.execute(ActivateUserRequest(alice.id, CODES[0]))
        await play.execute(PlayGameRequest(alice.id, "memory", 5))

        stats = await GetStatsQuery(FakeStatsReader(store)).execute()

        assert stats.total_users == 3
        assert stats.active_users == 1
        assert stats.activated_users == 1
        assert stats.total_game_sessions == 1
        assert stats.total_transactions == 1


class TestSearchExcludesCaller:
    async def test_caller_excluded_before_limit(self, store, user_query) -> None:
        caller = store.add_user(User(id=uuid4(), username="player00", email="p0@example.com"))
        for i in range(1, MAX_RESULTS + 1):
            store.add_user(User(id=uuid4(), username=f"player{i:02d}", email=f"p{i}@example.com"))

        results = await SearchUsersQuery(user_query).execute("player", exclude_user_id=caller.id)

        assert len(results) == MAX_RESULTS
        assert caller.id not in {u.id for u in results}
        assert results[-1].username == f"player{MAX_RESULTS:02d}"

    async def test_without_exclusion_caller_is_listed(self, store, alice: User, user_query) -> None:
        results = await SearchUsersQuery(user_query).execute("ali")

        assert [u.id for u in results] == [alice.id]
