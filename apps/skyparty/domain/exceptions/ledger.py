"""Ledger 도메인 예외."""

from apps.skyparty.domain.exceptions.base import DomainError


class InsufficientFundsError(DomainError):
    """잔액 부족."""

    def __init__(self, balance: int | None = None, amount: int | None = None) -> None:
        self.balance = balance
        self.amount = amount
        super().__init__("Insufficient credits")
