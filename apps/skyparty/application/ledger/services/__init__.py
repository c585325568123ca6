"""Ledger Services."""

from apps.skyparty.application.ledger.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
