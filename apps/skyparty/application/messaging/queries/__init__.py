"""Messaging Queries."""

from apps.skyparty.application.messaging.queries.list_conversations import (
    ListConversationsQuery,
)

__all__ = ["ListConversationsQuery"]
