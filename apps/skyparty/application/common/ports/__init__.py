"""Common Ports."""

from apps.skyparty.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
