"""Gift 도메인 예외."""

from apps.skyparty.domain.exceptions.base import DomainError


class GiftAlreadyProcessedError(DomainError):
    """이미 수령 또는 거절된 선물."""

    def __init__(self, gift_id: str | None = None) -> None:
        self.gift_id = gift_id
        super().__init__("Gift already processed")


class InvalidGiftTransitionError(DomainError):
    """허용되지 않는 선물 상태 전이."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition gift from '{current}' to '{target}'")
