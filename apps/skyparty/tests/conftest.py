"""Pytest configuration for skyparty tests."""

from uuid import uuid4

import pytest

from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.domain.entities import Character, User
from apps.skyparty.infrastructure.cache import get_catalog_cache
from apps.skyparty.tests.fakes import (
    FakeCatalogReader,
    FakeGameSessionGateway,
    FakeGiftGateway,
    FakeInventoryGateway,
    FakeLedgerGateway,
    FakeMessagingGateway,
    FakeTransactionManager,
    FakeUserCommandGateway,
    FakeUserQueryGateway,
    InMemoryStore,
)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    """싱글톤 캐시가 테스트 사이에 공유되지 않도록 초기화합니다."""
    get_catalog_cache().clear()
    yield
    get_catalog_cache().clear()


@pytest.fixture
def catalog() -> list[Character]:
    """테스트용 카탈로그."""
    return [
        Character(id="kitty", name="Kitty", icon="🐱", price=0),
        Character(id="puppy", name="Puppy", icon="🐶", price=100),
        Character(id="dragon", name="Dragon", icon="🐉", price=500, rarity="legendary"),
    ]


@pytest.fixture
def store(catalog: list[Character]) -> InMemoryStore:
    """카탈로그가 채워진 인메모리 저장소."""
    store = InMemoryStore()
    for character in catalog:
        store.characters[character.id] = character
    return store


@pytest.fixture
def alice(store: InMemoryStore) -> User:
    return store.add_user(
        User(
            id=uuid4(),
            username="alice",
            email="alice@example.com",
            game_credits=150,
            current_character="kitty",
            owned_characters={"kitty"},
        )
    )


@pytest.fixture
def bob(store: InMemoryStore) -> User:
    return store.add_user(
        User(
            id=uuid4(),
            username="bob",
            email="bob@example.com",
            game_credits=150,
            current_character="kitty",
            owned_characters={"kitty"},
        )
    )


# ============================================================
# In-memory gateways
# ============================================================


@pytest.fixture
def tx(store: InMemoryStore) -> FakeTransactionManager:
    return FakeTransactionManager(store)


@pytest.fixture
def user_query(store: InMemoryStore) -> FakeUserQueryGateway:
    return FakeUserQueryGateway(store)


@pytest.fixture
def user_command(store: InMemoryStore) -> FakeUserCommandGateway:
    return FakeUserCommandGateway(store)


@pytest.fixture
def inventory_gateway(store: InMemoryStore) -> FakeInventoryGateway:
    return FakeInventoryGateway(store)


@pytest.fixture
def gift_gateway(store: InMemoryStore) -> FakeGiftGateway:
    return FakeGiftGateway(store)


@pytest.fixture
def catalog_reader(store: InMemoryStore) -> FakeCatalogReader:
    return FakeCatalogReader(store)


@pytest.fixture
def ledger_service(store: InMemoryStore) -> LedgerService:
    return LedgerService(FakeLedgerGateway(store))


@pytest.fixture
def messaging_gateway(store: InMemoryStore) -> FakeMessagingGateway:
    return FakeMessagingGateway(store)


@pytest.fixture
def game_session_gateway(store: InMemoryStore) -> FakeGameSessionGateway:
    return FakeGameSessionGateway(store)
