"""Messaging DTOs."""

from apps.skyparty.application.messaging.dto.messaging import (
    ConversationView,
    MessageView,
    SendMessageRequest,
)

__all__ = ["ConversationView", "MessageView", "SendMessageRequest"]
