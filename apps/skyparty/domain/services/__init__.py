"""Domain Services."""

from apps.skyparty.domain.services.gift_settlement import (
    GiftSettlementService,
    SettlementPlan,
)

__all__ = ["GiftSettlementService", "SettlementPlan"]
