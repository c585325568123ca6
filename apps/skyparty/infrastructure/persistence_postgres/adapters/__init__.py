"""PostgreSQL Adapters."""

from apps.skyparty.infrastructure.persistence_postgres.adapters.catalog_gateway_sqla import (
    SqlaCatalogReader,
    SqlaCatalogWriter,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.game_session_gateway_sqla import (
    SqlaGameSessionGateway,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.gift_gateway_sqla import (
    SqlaGiftGateway,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.inventory_gateway_sqla import (
    SqlaInventoryGateway,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.ledger_gateway_sqla import (
    SqlaLedgerGateway,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.messaging_gateway_sqla import (
    SqlaMessagingGateway,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.stats_reader_sqla import (
    SqlaStatsReader,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.skyparty.infrastructure.persistence_postgres.adapters.user_gateway_sqla import (
    SqlaUserCommandGateway,
    SqlaUserQueryGateway,
)

__all__ = [
    "SqlaCatalogReader",
    "SqlaCatalogWriter",
    "SqlaGameSessionGateway",
    "SqlaGiftGateway",
    "SqlaInventoryGateway",
    "SqlaLedgerGateway",
    "SqlaMessagingGateway",
    "SqlaStatsReader",
    "SqlaTransactionManager",
    "SqlaUserCommandGateway",
    "SqlaUserQueryGateway",
]
