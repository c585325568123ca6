"""Messaging Ports."""

from apps.skyparty.application.messaging.ports.messaging_gateway import MessagingGateway

__all__ = ["MessagingGateway"]
