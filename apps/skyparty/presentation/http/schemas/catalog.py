"""Catalog HTTP schemas."""

from __future__ import annotations

from pydantic import Field

from apps.skyparty.presentation.http.schemas.base import CamelModel


class CharacterResponse(CamelModel):
    """카탈로그 캐릭터 스키마."""

    id: str = Field(..., description="캐릭터 ID")
    name: str = Field(..., description="캐릭터 이름")
    icon: str = Field("", description="아이콘")
    description: str = Field("", description="설명")
    price: int = Field(..., description="가격")
    rarity: str = Field("common", description="희귀도")
    category: str = Field("character", description="분류")


class CatalogResponse(CamelModel):
    success: bool = True
    characters: list[CharacterResponse]
    total: int


class CharacterEnvelope(CamelModel):
    success: bool = True
    character: CharacterResponse


class PurchaseResponse(CamelModel):
    success: bool = True
    new_balance: int
    owned_characters: list[str]


class SelectCharacterResponse(CamelModel):
    success: bool = True
    current_character: str
