"""Gift Domain Enums."""

from enum import Enum


class GiftStatus(str, Enum):
    """선물 상태.

    pending에서 시작하여 claimed 또는 rejected로 단 한 번 전이합니다.
    """

    PENDING = "pending"
    CLAIMED = "claimed"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """종료 상태 여부."""
        return self is not GiftStatus.PENDING


class GiftItemType(str, Enum):
    """선물 아이템 종류."""

    CHARACTER = "character"
    CREDITS = "credits"
