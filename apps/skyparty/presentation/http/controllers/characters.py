"""Characters controller - 카탈로그, 구매, 선택."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.skyparty.application.catalog.dto import CatalogItem
from apps.skyparty.application.catalog.queries import GetCatalogQuery, GetCharacterQuery
from apps.skyparty.application.directory.commands import SelectCharacterCommand
from apps.skyparty.application.inventory.commands import PurchaseCharacterCommand
from apps.skyparty.presentation.http.auth import get_auth_user_id
from apps.skyparty.presentation.http.schemas import (
    CatalogResponse,
    CharacterEnvelope,
    CharacterResponse,
    PurchaseResponse,
    SelectCharacterResponse,
)
from apps.skyparty.setup.dependencies import (
    get_catalog_query,
    get_character_query,
    get_purchase_character_command,
    get_select_character_command,
)

router = APIRouter(prefix="/characters", tags=["characters"])


def _to_response(item: CatalogItem) -> CharacterResponse:
    return CharacterResponse(
        id=item.id,
        name=item.name,
        icon=item.icon,
        description=item.description,
        price=item.price,
        rarity=item.rarity,
        category=item.category,
    )


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(
    query: GetCatalogQuery = Depends(get_catalog_query),
) -> CatalogResponse:
    """판매 중인 캐릭터 카탈로그를 조회합니다 (가격, 이름 순)."""
    result = await query.execute()
    return CatalogResponse(
        characters=[_to_response(item) for item in result.items],
        total=result.total,
    )


@router.get("/{character_id}", response_model=CharacterEnvelope)
async def get_character(
    character_id: str,
    query: GetCharacterQuery = Depends(get_character_query),
) -> CharacterEnvelope:
    item = await query.execute(character_id)
    return CharacterEnvelope(character=_to_response(item))


@router.post("/{character_id}/purchase", response_model=PurchaseResponse)
async def purchase_character(
    character_id: str,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: PurchaseCharacterCommand = Depends(get_purchase_character_command),
) -> PurchaseResponse:
    """카탈로그 가격으로 캐릭터를 구매합니다."""
    result = await command.execute(auth_user_id, character_id)
    return PurchaseResponse(
        new_balance=result.new_balance,
        owned_characters=list(result.owned_characters),
    )


@router.post("/{character_id}/select", response_model=SelectCharacterResponse)
async def select_character(
    character_id: str,
    auth_user_id: UUID = Depends(get_auth_user_id),
    command: SelectCharacterCommand = Depends(get_select_character_command),
) -> SelectCharacterResponse:
    """보유한 캐릭터를 현재 캐릭터로 선택합니다."""
    current = await command.execute(auth_user_id, character_id)
    return SelectCharacterResponse(current_character=current)
