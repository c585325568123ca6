"""Gift Queries."""

from apps.skyparty.application.gift.queries.list_pending_gifts import ListPendingGiftsQuery

__all__ = ["ListPendingGiftsQuery"]
