"""Messaging Commands."""

from apps.skyparty.application.messaging.commands.send_message import SendMessageCommand

__all__ = ["SendMessageCommand"]
