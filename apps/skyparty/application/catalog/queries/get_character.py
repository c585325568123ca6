"""GetCharacterQuery."""

from apps.skyparty.application.catalog.dto import CatalogItem
from apps.skyparty.application.catalog.ports import CatalogReader
from apps.skyparty.application.catalog.services import CatalogService
from apps.skyparty.application.common.exceptions import CharacterNotFoundError


class GetCharacterQuery:
    """캐릭터 단건 조회."""

    def __init__(self, reader: CatalogReader) -> None:
        self._reader = reader

    async def execute(self, character_id: str) -> CatalogItem:
        """Raises:
        CharacterNotFoundError: 카탈로그에 없는 캐릭터
        """
        character = await self._reader.get_by_id(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return CatalogService.to_item(character)
