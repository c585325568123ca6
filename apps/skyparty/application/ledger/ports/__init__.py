"""Ledger Ports."""

from apps.skyparty.application.ledger.ports.ledger_gateway import LedgerGateway

__all__ = ["LedgerGateway"]
