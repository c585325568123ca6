"""Gift DTOs."""

from apps.skyparty.application.gift.dto.gift import GiftView, SendGiftRequest

__all__ = ["GiftView", "SendGiftRequest"]
