"""HTTP schemas."""

from apps.skyparty.presentation.http.schemas.base import CamelModel, ErrorResponse
from apps.skyparty.presentation.http.schemas.catalog import (
    CatalogResponse,
    CharacterEnvelope,
    CharacterResponse,
    PurchaseResponse,
    SelectCharacterResponse,
)
from apps.skyparty.presentation.http.schemas.game import PlayGameRequestSchema, PlayGameResponse
from apps.skyparty.presentation.http.schemas.gift import (
    GiftActionResponse,
    GiftResponse,
    ItemDataSchema,
    PendingGiftsResponse,
    SendGiftRequestSchema,
    SendGiftResponse,
)
from apps.skyparty.presentation.http.schemas.inventory import (
    AddInventoryItemRequestSchema,
    AddInventoryItemResponse,
    InventoryItemResponse,
    InventoryListResponse,
)
from apps.skyparty.presentation.http.schemas.ledger import (
    AdjustCreditsRequestSchema,
    AdjustCreditsResponse,
    TransactionListResponse,
    TransactionResponse,
)
from apps.skyparty.presentation.http.schemas.messaging import (
    ConversationListResponse,
    ConversationResponse,
    MessageResponse,
    SendMessageRequestSchema,
    SendMessageResponse,
)
from apps.skyparty.presentation.http.schemas.stats import StatsEnvelope, StatsResponse
from apps.skyparty.presentation.http.schemas.user import (
    ActivateUserRequestSchema,
    LoginRequestSchema,
    RegisterUserRequestSchema,
    UserEnvelope,
    UserResponse,
    UserSearchResponse,
    UserSummaryResponse,
)

__all__ = [
    "ActivateUserRequestSchema",
    "AddInventoryItemRequestSchema",
    "AddInventoryItemResponse",
    "AdjustCreditsRequestSchema",
    "AdjustCreditsResponse",
    "CamelModel",
    "CatalogResponse",
    "CharacterEnvelope",
    "CharacterResponse",
    "ConversationListResponse",
    "ConversationResponse",
    "ErrorResponse",
    "GiftActionResponse",
    "GiftResponse",
    "InventoryItemResponse",
    "InventoryListResponse",
    "ItemDataSchema",
    "LoginRequestSchema",
    "MessageResponse",
    "PendingGiftsResponse",
    "PlayGameRequestSchema",
    "PlayGameResponse",
    "PurchaseResponse",
    "RegisterUserRequestSchema",
    "SelectCharacterResponse",
    "SendGiftRequestSchema",
    "SendGiftResponse",
    "SendMessageRequestSchema",
    "SendMessageResponse",
    "StatsEnvelope",
    "StatsResponse",
    "TransactionListResponse",
    "TransactionResponse",
    "UserEnvelope",
    "UserResponse",
    "UserSearchResponse",
    "UserSummaryResponse",
]
