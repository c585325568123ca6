"""Catalog 테스트 (조회, 로컬 캐시, 시드)."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from apps.skyparty.application.catalog.commands import SeedCatalogCommand
from apps.skyparty.application.catalog.queries import GetCatalogQuery, GetCharacterQuery
from apps.skyparty.application.catalog.services import CatalogService
from apps.skyparty.application.common.exceptions import CharacterNotFoundError
from apps.skyparty.domain.entities import Character
from apps.skyparty.infrastructure.cache import LocalCachedCatalogReader, get_catalog_cache
from apps.skyparty.infrastructure.persistence_postgres.catalog_seed import load_catalog
from apps.skyparty.tests.fakes import FakeCatalogWriter, FakeTransactionManager, InMemoryStore


class TestCatalogService:
    def test_sorted_by_price_then_name_and_inactive_hidden(self) -> None:
        characters = [
            Character(id="b", name="Bee", price=100),
            Character(id="z", name="Zebra", price=0),
            Character(id="a", name="Ant", price=100),
            Character(id="x", name="Ghost", price=10, is_active=False),
        ]

        items = CatalogService().build_catalog_items(characters)

        assert [item.id for item in items] == ["z", "a", "b"]


@pytest.mark.asyncio
class TestCatalogQueries:
    async def test_get_catalog(self, catalog_reader) -> None:
        result = await GetCatalogQuery(catalog_reader, CatalogService()).execute()

        assert result.total == 3
        assert [item.id for item in result.items] == ["kitty", "puppy", "dragon"]
        assert result.items[-1].rarity == "legendary"

    async def test_get_character(self, catalog_reader) -> None:
        item = await GetCharacterQuery(catalog_reader).execute("puppy")
        assert item.price == 100

    async def test_get_unknown_character(self, catalog_reader) -> None:
        with pytest.raises(CharacterNotFoundError):
            await GetCharacterQuery(catalog_reader).execute("phoenix")


@pytest.mark.asyncio
class TestLocalCachedCatalogReader:
    """로컬 캐시 Reader.

    검증 포인트:
    1. 최초 조회 시 delegate 호출 후 캐시 저장
    2. 이후 조회는 delegate를 호출하지 않음
    3. 캐시에 없는 단건은 delegate로 fallback
    """

    async def test_miss_then_hit(self, catalog: list[Character]) -> None:
        delegate = AsyncMock()
        delegate.list_active = AsyncMock(return_value=catalog)
        reader = LocalCachedCatalogReader(delegate)

        first = await reader.list_active()
        second = await reader.list_active()

        assert list(first) == catalog
        assert list(second) == catalog
        delegate.list_active.assert_awaited_once()
        assert get_catalog_cache().count() == 3

    async def test_get_by_id_falls_back_to_delegate(self) -> None:
        retired = Character(id="ghost", name="Ghost", is_active=False)
        delegate = AsyncMock()
        delegate.get_by_id = AsyncMock(return_value=retired)
        reader = LocalCachedCatalogReader(delegate)

        assert await reader.get_by_id("ghost") is retired
        delegate.get_by_id.assert_awaited_once_with("ghost")

    async def test_get_by_id_served_from_cache(self, catalog: list[Character]) -> None:
        get_catalog_cache().set_all(catalog)
        delegate = AsyncMock()
        reader = LocalCachedCatalogReader(delegate)

        character = await reader.get_by_id("dragon")

        assert character is not None
        assert character.price == 500
        delegate.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
class TestSeedCatalog:
    async def test_seed_is_idempotent(self, catalog: list[Character]) -> None:
        store = InMemoryStore()
        command = SeedCatalogCommand(FakeCatalogWriter(store), FakeTransactionManager(store))

        assert await command.execute(catalog) == 3
        assert await command.execute(catalog) == 0
        assert set(store.characters) == {"kitty", "puppy", "dragon"}

    async def test_seed_does_not_overwrite_existing_rows(self, store: InMemoryStore) -> None:
        store.characters["puppy"].price = 120
        command = SeedCatalogCommand(FakeCatalogWriter(store), FakeTransactionManager(store))

        await command.execute([Character(id="puppy", name="Puppy", price=100)])

        assert store.characters["puppy"].price == 120

    async def test_empty_seed(self) -> None:
        store = InMemoryStore()
        command = SeedCatalogCommand(FakeCatalogWriter(store), FakeTransactionManager(store))
        assert await command.execute([]) == 0


class TestLoadCatalog:
    def test_packaged_catalog(self) -> None:
        characters = {c.id: c for c in load_catalog()}

        assert characters["kitty"].price == 0
        assert characters["dragon"].price == 500
        assert characters["dragon"].rarity == "legendary"
        assert len(characters) == 7

    def test_invalid_rows_are_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.csv"
        path.write_text(
            "id,name,price\nkitty,Kitty,0\n,Nameless,10\nfox,Fox,cheap\n", encoding="utf-8"
        )

        assert [c.id for c in load_catalog(path)] == ["kitty"]

    def test_price_beyond_integer_column_is_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.csv"
        path.write_text(
            f"id,name,price\nkitty,Kitty,0\nwhale,Whale,{2**40}\n", encoding="utf-8"
        )

        assert [c.id for c in load_catalog(path)] == ["kitty"]

    def test_missing_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.csv"
        path.write_text("id,name\nkitty,Kitty\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_catalog(path)
