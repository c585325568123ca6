"""회원 가입, 캐릭터 선택, 구매, 인벤토리 테스트."""

from uuid import uuid4

import pytest

from apps.skyparty.application.common.exceptions import (
    CharacterNotFoundError,
    DuplicateUserError,
    UserNotFoundError,
    ValidationError,
)
from apps.skyparty.application.directory.commands import (
    RegisterUserCommand,
    SelectCharacterCommand,
)
from apps.skyparty.application.directory.dto import RegisterUserRequest
from apps.skyparty.application.directory.queries import GetUserQuery, SearchUsersQuery
from apps.skyparty.application.inventory.commands import (
    AddInventoryItemCommand,
    PurchaseCharacterCommand,
)
from apps.skyparty.application.inventory.dto import AddInventoryItemRequest
from apps.skyparty.application.inventory.queries import ListInventoryQuery
from apps.skyparty.domain.entities import User
from apps.skyparty.domain.enums import BalanceOperation, ItemSource
from apps.skyparty.domain.exceptions import CharacterNotOwnedError, InsufficientFundsError
from apps.skyparty.infrastructure.security import BcryptPasswordHasher

pytestmark = pytest.mark.asyncio


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def register(user_query, user_command, inventory_gateway, catalog_reader, hasher, tx):
    return RegisterUserCommand(
        user_query, user_command, inventory_gateway, catalog_reader, hasher, tx
    )


@pytest.fixture
def purchase(catalog_reader, user_query, user_command, inventory_gateway, ledger_service, tx):
    return PurchaseCharacterCommand(
        catalog_reader, user_query, user_command, inventory_gateway, ledger_service, tx
    )


class TestRegisterUser:
    async def test_new_user_gets_starter_kit(self, store, register, hasher) -> None:
        view = await register.execute(
            RegisterUserRequest(username="carol", email="Carol@Example.com", password="pw")
        )

        assert view.game_credits == 150
        assert view.current_character == "kitty"
        assert view.owned_characters == ("kitty",)
        assert view.email == "carol@example.com"

        [starter] = store.inventory_of(view.id)
        assert starter.source is ItemSource.DEFAULT
        assert starter.character_id == "kitty"
        assert starter.name == "Kitty"

        stored = store.users[view.id]
        assert stored.password_hash != "pw"
        assert hasher.verify("pw", stored.password_hash)

    async def test_duplicate_email(self, store, alice: User, register) -> None:
        with pytest.raises(DuplicateUserError):
            await register.execute(
                RegisterUserRequest(username="alice2", email="alice@example.com", password="pw")
            )
        assert len(store.users) == 1

    async def test_duplicate_username(self, alice: User, register) -> None:
        with pytest.raises(DuplicateUserError):
            await register.execute(
                RegisterUserRequest(username="alice", email="other@example.com", password="pw")
            )

    @pytest.mark.parametrize(
        ("username", "email", "password"),
        [("", "a@b.c", "pw"), ("dave", "", "pw"), ("dave", "a@b.c", ""), ("dave", "nope", "pw")],
    )
    async def test_invalid_input(self, register, username, email, password) -> None:
        with pytest.raises(ValidationError):
            await register.execute(RegisterUserRequest(username, email, password))


class TestUserQueries:
    async def test_get_user(self, alice: User, user_query) -> None:
        view = await GetUserQuery(user_query).execute(alice.id)
        assert view.username == "alice"
        assert not hasattr(view, "password_hash")

    async def test_get_unknown_user(self, store, user_query) -> None:
        with pytest.raises(UserNotFoundError):
            await GetUserQuery(user_query).execute(uuid4())

    async def test_search_is_case_insensitive_substring(
        self, alice: User, bob: User, user_query
    ) -> None:
        results = await SearchUsersQuery(user_query).execute("LI")
        assert [u.username for u in results] == ["alice"]

    async def test_blank_search_returns_nothing(self, alice: User, user_query) -> None:
        assert await SearchUsersQuery(user_query).execute("   ") == []


class TestSelectCharacter:
    async def test_select_owned(self, store, alice: User, user_query, user_command, tx) -> None:
        store.users[alice.id].owned_characters.add("puppy")
        command = SelectCharacterCommand(user_query, user_command, tx)

        assert await command.execute(alice.id, "puppy") == "puppy"
        assert store.users[alice.id].current_character == "puppy"

    async def test_select_not_owned(self, store, alice: User, user_query, user_command, tx) -> None:
        command = SelectCharacterCommand(user_query, user_command, tx)

        with pytest.raises(CharacterNotOwnedError):
            await command.execute(alice.id, "dragon")
        assert store.users[alice.id].current_character == "kitty"


class TestPurchaseCharacter:
    """구매는 잔액 차감, 보유 합집합, 인벤토리 추가가 함께 적용됩니다."""

    async def test_purchase_deducts_catalog_price(self, store, alice: User, purchase) -> None:
        result = await purchase.execute(alice.id, "puppy")

        assert result.new_balance == 50
        assert result.owned_characters == ("kitty", "puppy")
        assert store.users[alice.id].game_credits == 50
        [item] = store.inventory_of(alice.id)
        assert item.source is ItemSource.PURCHASE
        [debit] = store.transactions_of(alice.id)
        assert debit.type is BalanceOperation.SUBTRACT
        assert debit.amount == -100

    async def test_insufficient_funds_changes_nothing(
        self, store, alice: User, purchase, tx
    ) -> None:
        with pytest.raises(InsufficientFundsError):
            await purchase.execute(alice.id, "dragon")

        assert store.users[alice.id].game_credits == 150
        assert store.users[alice.id].owned_characters == {"kitty"}
        assert store.inventory_of(alice.id) == []
        assert store.transactions == []
        assert tx.rollbacks == 1

    async def test_free_character_skips_ledger(self, store, alice: User, purchase) -> None:
        result = await purchase.execute(alice.id, "kitty")

        assert result.new_balance == 150
        assert store.transactions == []
        assert len(store.inventory_of(alice.id)) == 1

    async def test_inactive_character(self, store, alice: User, purchase) -> None:
        store.characters["puppy"].is_active = False

        with pytest.raises(CharacterNotFoundError):
            await purchase.execute(alice.id, "puppy")

    async def test_unknown_character(self, alice: User, purchase) -> None:
        with pytest.raises(CharacterNotFoundError):
            await purchase.execute(alice.id, "phoenix")


class TestInventory:
    async def test_add_and_list_newest_first(
        self, alice: User, user_query, inventory_gateway, tx
    ) -> None:
        add = AddInventoryItemCommand(user_query, inventory_gateway, tx)
        first = await add.execute(AddInventoryItemRequest(alice.id, "item", "Balloon"))
        second = await add.execute(AddInventoryItemRequest(alice.id, "item", "Kite", price=5))

        views = await ListInventoryQuery(user_query, inventory_gateway).execute(alice.id)

        assert [v.id for v in views] == [second, first]
        assert views[0].source == "purchase"

    async def test_add_rejects_blank_name(
        self, alice: User, user_query, inventory_gateway, tx
    ) -> None:
        add = AddInventoryItemCommand(user_query, inventory_gateway, tx)
        with pytest.raises(ValidationError):
            await add.execute(AddInventoryItemRequest(alice.id, "item", "  "))

    @pytest.mark.parametrize("price", [-1, 2**31, 2**40])
    async def test_add_rejects_price_out_of_range(
        self, store, alice: User, user_query, inventory_gateway, tx, price: int
    ) -> None:
        add = AddInventoryItemCommand(user_query, inventory_gateway, tx)

        with pytest.raises(ValidationError):
            await add.execute(AddInventoryItemRequest(alice.id, "item", "Balloon", price=price))

        assert store.inventory_of(alice.id) == []

    async def test_list_unknown_user(self, store, user_query, inventory_gateway) -> None:
        with pytest.raises(UserNotFoundError):
            await ListInventoryQuery(user_query, inventory_gateway).execute(uuid4())
