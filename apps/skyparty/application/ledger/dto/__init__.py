"""Ledger DTOs."""

from apps.skyparty.application.ledger.dto.ledger import (
    AdjustCreditsRequest,
    AdjustCreditsResult,
)

__all__ = ["AdjustCreditsRequest", "AdjustCreditsResult"]
