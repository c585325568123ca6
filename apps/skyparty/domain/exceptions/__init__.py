"""Domain Exceptions."""

from apps.skyparty.domain.exceptions.base import DomainError
from apps.skyparty.domain.exceptions.character import CharacterNotOwnedError
from apps.skyparty.domain.exceptions.gift import (
    GiftAlreadyProcessedError,
    InvalidGiftTransitionError,
)
from apps.skyparty.domain.exceptions.ledger import InsufficientFundsError

__all__ = [
    "CharacterNotOwnedError",
    "DomainError",
    "GiftAlreadyProcessedError",
    "InsufficientFundsError",
    "InvalidGiftTransitionError",
]
