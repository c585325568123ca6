"""Dependency Injection for FastAPI.

요청마다 하나의 AsyncSession을 열고, 같은 세션을 공유하는 게이트웨이와
트랜잭션 관리자를 Command/Query에 주입합니다.
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.skyparty.application.catalog.ports import CatalogReader
from apps.skyparty.application.catalog.queries import GetCatalogQuery, GetCharacterQuery
from apps.skyparty.application.catalog.services import CatalogService
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.commands import (
    ActivateUserCommand,
    LoginCommand,
    RegisterUserCommand,
    SelectCharacterCommand,
)
from apps.skyparty.application.directory.ports import (
    PasswordHasher,
    UserCommandGateway,
    UserQueryGateway,
)
from apps.skyparty.application.directory.queries import GetUserQuery, SearchUsersQuery
from apps.skyparty.application.game.commands import PlayGameCommand
from apps.skyparty.application.game.ports import GameSessionGateway
from apps.skyparty.application.gift.commands import (
    ClaimGiftCommand,
    RejectGiftCommand,
    SendGiftCommand,
)
from apps.skyparty.application.gift.ports import GiftGateway
from apps.skyparty.application.gift.queries import ListPendingGiftsQuery
from apps.skyparty.application.inventory.commands import (
    AddInventoryItemCommand,
    PurchaseCharacterCommand,
)
from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.application.inventory.queries import ListInventoryQuery
from apps.skyparty.application.ledger.commands import AdjustCreditsCommand
from apps.skyparty.application.ledger.ports import LedgerGateway
from apps.skyparty.application.ledger.queries import GetTransactionsQuery
from apps.skyparty.application.ledger.services import LedgerService
from apps.skyparty.application.messaging.commands import SendMessageCommand
from apps.skyparty.application.messaging.ports import MessagingGateway
from apps.skyparty.application.messaging.queries import ListConversationsQuery
from apps.skyparty.application.stats.queries import GetStatsQuery
from apps.skyparty.infrastructure.cache import LocalCachedCatalogReader
from apps.skyparty.infrastructure.persistence_postgres.adapters import (
    SqlaCatalogReader,
    SqlaGameSessionGateway,
    SqlaGiftGateway,
    SqlaInventoryGateway,
    SqlaLedgerGateway,
    SqlaMessagingGateway,
    SqlaStatsReader,
    SqlaTransactionManager,
    SqlaUserCommandGateway,
    SqlaUserQueryGateway,
)
from apps.skyparty.infrastructure.security import BcryptPasswordHasher
from apps.skyparty.setup.config import get_settings
from apps.skyparty.setup.database import async_session_factory


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """DB 세션을 주입합니다."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ============================================================
# Gateways
# ============================================================


async def get_transaction_manager(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> TransactionManager:
    return SqlaTransactionManager(session)


async def get_user_query_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserQueryGateway:
    return SqlaUserQueryGateway(session)


async def get_user_command_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserCommandGateway:
    return SqlaUserCommandGateway(session)


async def get_ledger_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LedgerGateway:
    return SqlaLedgerGateway(session)


async def get_inventory_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> InventoryGateway:
    return SqlaInventoryGateway(session)


async def get_gift_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> GiftGateway:
    return SqlaGiftGateway(session)


async def get_messaging_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessagingGateway:
    return SqlaMessagingGateway(session)


async def get_game_session_gateway(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> GameSessionGateway:
    return SqlaGameSessionGateway(session)


async def get_catalog_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CatalogReader:
    """로컬 캐시된 Catalog Reader를 주입합니다.

    캐시 miss 시 DB fallback.
    """
    return LocalCachedCatalogReader(SqlaCatalogReader(session))


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


async def get_ledger_service(
    gateway: Annotated[LedgerGateway, Depends(get_ledger_gateway)],
) -> LedgerService:
    """LedgerService를 주입합니다."""
    return LedgerService(gateway)


# ============================================================
# Directory
# ============================================================


async def get_register_user_command(
    query_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
    catalog_reader: Annotated[CatalogReader, Depends(get_catalog_reader)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> RegisterUserCommand:
    """RegisterUserCommand를 주입합니다."""
    settings = get_settings()
    return RegisterUserCommand(
        query_gateway=query_gateway,
        command_gateway=command_gateway,
        inventory_gateway=inventory_gateway,
        catalog_reader=catalog_reader,
        password_hasher=password_hasher,
        transaction_manager=transaction_manager,
        starting_credits=settings.starting_credits,
        starter_character_id=settings.starter_character_id,
    )


async def get_select_character_command(
    query_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> SelectCharacterCommand:
    return SelectCharacterCommand(query_gateway, command_gateway, transaction_manager)


async def get_login_command(
    query_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> LoginCommand:
    """LoginCommand를 주입합니다."""
    return LoginCommand(query_gateway, command_gateway, password_hasher, transaction_manager)


async def get_activate_user_command(
    query_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> ActivateUserCommand:
    return ActivateUserCommand(
        query_gateway,
        command_gateway,
        transaction_manager,
        valid_codes=get_settings().activation_codes,
    )


async def get_user_query(
    gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
) -> GetUserQuery:
    return GetUserQuery(gateway)


async def get_search_users_query(
    gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
) -> SearchUsersQuery:
    return SearchUsersQuery(gateway)


# ============================================================
# Ledger
# ============================================================


async def get_adjust_credits_command(
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> AdjustCreditsCommand:
    """AdjustCreditsCommand를 주입합니다."""
    return AdjustCreditsCommand(ledger_service, transaction_manager)


async def get_transactions_query(
    gateway: Annotated[LedgerGateway, Depends(get_ledger_gateway)],
) -> GetTransactionsQuery:
    return GetTransactionsQuery(gateway)


# ============================================================
# Catalog / Inventory
# ============================================================


async def get_catalog_service() -> CatalogService:
    """CatalogService를 주입합니다."""
    return CatalogService()


async def get_catalog_query(
    reader: Annotated[CatalogReader, Depends(get_catalog_reader)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> GetCatalogQuery:
    """GetCatalogQuery를 주입합니다."""
    return GetCatalogQuery(reader, service)


async def get_character_query(
    reader: Annotated[CatalogReader, Depends(get_catalog_reader)],
) -> GetCharacterQuery:
    return GetCharacterQuery(reader)


async def get_purchase_character_command(
    catalog_reader: Annotated[CatalogReader, Depends(get_catalog_reader)],
    user_query_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    user_command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> PurchaseCharacterCommand:
    """PurchaseCharacterCommand를 주입합니다."""
    return PurchaseCharacterCommand(
        catalog_reader=catalog_reader,
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        inventory_gateway=inventory_gateway,
        ledger_service=ledger_service,
        transaction_manager=transaction_manager,
    )


async def get_add_inventory_item_command(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> AddInventoryItemCommand:
    return AddInventoryItemCommand(user_gateway, inventory_gateway, transaction_manager)


async def get_list_inventory_query(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
) -> ListInventoryQuery:
    return ListInventoryQuery(user_gateway, inventory_gateway)


# ============================================================
# Gift
# ============================================================


async def get_send_gift_command(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    gift_gateway: Annotated[GiftGateway, Depends(get_gift_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> SendGiftCommand:
    """SendGiftCommand를 주입합니다."""
    return SendGiftCommand(user_gateway, gift_gateway, transaction_manager)


async def get_claim_gift_command(
    gift_gateway: Annotated[GiftGateway, Depends(get_gift_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
    user_command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> ClaimGiftCommand:
    """ClaimGiftCommand를 주입합니다."""
    return ClaimGiftCommand(
        gift_gateway=gift_gateway,
        inventory_gateway=inventory_gateway,
        user_command_gateway=user_command_gateway,
        ledger_service=ledger_service,
        transaction_manager=transaction_manager,
    )


async def get_reject_gift_command(
    gift_gateway: Annotated[GiftGateway, Depends(get_gift_gateway)],
    inventory_gateway: Annotated[InventoryGateway, Depends(get_inventory_gateway)],
    user_command_gateway: Annotated[UserCommandGateway, Depends(get_user_command_gateway)],
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> RejectGiftCommand:
    """RejectGiftCommand를 주입합니다."""
    return RejectGiftCommand(
        gift_gateway=gift_gateway,
        inventory_gateway=inventory_gateway,
        user_command_gateway=user_command_gateway,
        ledger_service=ledger_service,
        transaction_manager=transaction_manager,
    )


async def get_list_pending_gifts_query(
    gift_gateway: Annotated[GiftGateway, Depends(get_gift_gateway)],
) -> ListPendingGiftsQuery:
    return ListPendingGiftsQuery(gift_gateway)


# ============================================================
# Messaging
# ============================================================


async def get_send_message_command(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    messaging_gateway: Annotated[MessagingGateway, Depends(get_messaging_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> SendMessageCommand:
    """SendMessageCommand를 주입합니다."""
    return SendMessageCommand(user_gateway, messaging_gateway, transaction_manager)


async def get_list_conversations_query(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    messaging_gateway: Annotated[MessagingGateway, Depends(get_messaging_gateway)],
) -> ListConversationsQuery:
    return ListConversationsQuery(user_gateway, messaging_gateway)


# ============================================================
# Game
# ============================================================


async def get_play_game_command(
    user_gateway: Annotated[UserQueryGateway, Depends(get_user_query_gateway)],
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    game_session_gateway: Annotated[GameSessionGateway, Depends(get_game_session_gateway)],
    transaction_manager: Annotated[TransactionManager, Depends(get_transaction_manager)],
) -> PlayGameCommand:
    """PlayGameCommand를 주입합니다."""
    return PlayGameCommand(
        user_gateway=user_gateway,
        ledger_service=ledger_service,
        game_session_gateway=game_session_gateway,
        transaction_manager=transaction_manager,
        max_reward=get_settings().max_game_reward,
    )


# ============================================================
# Stats
# ============================================================


async def get_stats_query(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> GetStatsQuery:
    return GetStatsQuery(
        SqlaStatsReader(session),
        active_window_days=get_settings().active_user_window_days,
    )
