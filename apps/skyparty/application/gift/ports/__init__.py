"""Gift Ports."""

from apps.skyparty.application.gift.ports.gift_gateway import GiftGateway

__all__ = ["GiftGateway"]
