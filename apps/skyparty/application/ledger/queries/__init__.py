"""Ledger Queries."""

from apps.skyparty.application.ledger.queries.get_transactions import GetTransactionsQuery

__all__ = ["GetTransactionsQuery"]
